from descent_harness.cli import run

run()
