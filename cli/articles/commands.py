from typing import NoReturn, Optional

import typer

from cli.core.session import load_token
from cli.core.api import ApiError, api_list_articles, api_get_article, api_create_article, api_update_article, api_delete_article


app = typer.Typer(help="Article commands (list, show, create, update, delete)")


def _fail(exc: ApiError) -> NoReturn:
    typer.echo(f"Error: {exc.message}")
    raise typer.Exit(code=1)


@app.command("list")
def list_articles():
    try:
        articles = api_list_articles(load_token())
    except ApiError as exc:
        _fail(exc)

    if not articles:
        typer.echo("No articles.")
        return
    for article in articles:
        flag = "published" if article.get("published") else "draft"
        typer.echo(f"{article['id']}  [{flag}]  {article['title']}")


@app.command("show")
def show_article(article_id: str):
    try:
        article = api_get_article(article_id, load_token())
    except ApiError as exc:
        _fail(exc)

    typer.echo(article["title"])
    typer.echo(f"Created: {article['createdAt']}  Updated: {article['updatedAt']}")
    typer.echo("")
    typer.echo(article["content"])


@app.command("create")
def create_article(
    title: str = typer.Option(..., "--title", "-t", help="Article title"),
    content: str = typer.Option(..., "--content", "-c", help="Article body"),
):
    if not title.strip() or not content.strip():
        typer.echo("Title and content cannot be empty.")
        raise typer.Exit(code=1)

    try:
        article = api_create_article({"title": title, "content": content}, load_token())
    except ApiError as exc:
        _fail(exc)
    typer.echo(f"Created article {article['id']}.")


@app.command("update")
def update_article(
    article_id: str,
    title: Optional[str] = typer.Option(None, "--title", "-t"),
    content: Optional[str] = typer.Option(None, "--content", "-c"),
    published: Optional[bool] = typer.Option(None, "--published/--draft"),
):
    changes = {key: value for key, value in
               {"title": title, "content": content, "published": published}.items()
               if value is not None}
    if not changes:
        typer.echo("Nothing to update.")
        raise typer.Exit(code=1)

    try:
        api_update_article(article_id, changes, load_token())
    except ApiError as exc:
        _fail(exc)
    typer.echo(f"Updated article {article_id}.")


@app.command("delete")
def delete_article(article_id: str):
    try:
        api_delete_article(article_id, load_token())
    except ApiError as exc:
        _fail(exc)
    typer.echo(f"Deleted article {article_id}.")
