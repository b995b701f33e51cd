from tinywiki.main import run

run()
