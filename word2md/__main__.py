from word2md.cli import app

app()
