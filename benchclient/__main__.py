from benchclient.main import run

run()
