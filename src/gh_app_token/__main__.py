from .cli import app

app(prog_name="gh-app-token")
