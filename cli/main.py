# cli/main.py


import typer
from cli.auth.commands import app as auth_app
from cli.articles.commands import app as articles_app
from cli.admin.commands import app as admin_app

app = typer.Typer()
app.add_typer(auth_app, name="auth")
app.add_typer(articles_app, name="articles")
app.add_typer(admin_app, name="admin")

if __name__ == "__main__":
    app()
