from datetime import datetime, timezone

from sqlmodel import Session, select

from ..core.errors import NotFound
from ..models.Article import Article
from .schemas import ArticleCreate, ArticleUpdate

async def create_article(session: Session, data: ArticleCreate) -> Article:
    article = Article(title=data.title, content=data.content)
    session.add(article)
    session.commit()
    session.refresh(article)
    return article

async def list_articles(session: Session) -> list[Article]:
    statement = select(Article).order_by(Article.created_at.desc())
    return list(session.exec(statement).all())

async def get_article(session: Session, article_id: str) -> Article:
    article = session.get(Article, article_id)
    if not article:
        raise NotFound("Article not found")
    return article

async def update_article(session: Session, article_id: str, data: ArticleUpdate) -> Article:
    article = await get_article(session, article_id)

    changes = data.model_dump(exclude_unset=True)
    # explicit nulls leave the stored value alone
    changes = {field: value for field, value in changes.items() if value is not None}
    if not changes:
        return article

    for field, value in changes.items():
        setattr(article, field, value)
    article.updated_at = datetime.now(timezone.utc)

    session.add(article)
    session.commit()
    session.refresh(article)
    return article

async def delete_article(session: Session, article_id: str) -> None:
    article = await get_article(session, article_id)
    session.delete(article)
    session.commit()
