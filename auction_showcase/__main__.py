from auction_showcase.cli import run

run()
