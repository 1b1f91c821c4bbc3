from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from ..core.database import get_session
from .schemas import ArticleCreate, ArticleResponse, ArticleUpdate
from .service import create_article, delete_article, get_article, list_articles, update_article

router = APIRouter(prefix="/articles", tags=["articles"])

@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_new_article(data: ArticleCreate, session: Session = Depends(get_session)):
    """
    Create an article. Title and content must not be empty.
    """
    return await create_article(session, data)

@router.get("", response_model=list[ArticleResponse])
async def read_articles(session: Session = Depends(get_session)):
    return await list_articles(session)

@router.get("/{article_id}", response_model=ArticleResponse)
async def read_article(article_id: str, session: Session = Depends(get_session)):
    return await get_article(session, article_id)

@router.patch("/{article_id}", response_model=ArticleResponse)
async def patch_article(article_id: str, data: ArticleUpdate, session: Session = Depends(get_session)):
    """
    Update only the fields present in the body.
    """
    return await update_article(session, article_id, data)

@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_article(article_id: str, session: Session = Depends(get_session)):
    await delete_article(session, article_id)
    return None
