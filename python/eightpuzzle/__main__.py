from eightpuzzle.main import app

app()
