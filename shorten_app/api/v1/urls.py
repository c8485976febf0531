import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from shorten_app.dependencies import get_shortener
from shorten_app.exceptions import InvalidUrlError, ShortenerError
from shorten_app.schemas.url import URLCreate, URLResponse
from shorten_app.services.shortener import Shortener

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/urls", tags=["urls"])

# Plain-text endpoint kept for existing clients of POST /generate
generate_router = APIRouter(tags=["urls"])


@router.post("/", response_model=URLResponse, status_code=status.HTTP_201_CREATED)
def create_short_url(
    url_data: URLCreate,
    shortener: Shortener = Depends(get_shortener)
):
    """Create a new short URL"""
    try:
        return shortener.store(url_data.url)
    except InvalidUrlError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        )
    except ShortenerError as e:
        logger.error("Failed to store %r: %s", url_data.url, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@generate_router.post("/generate", response_class=PlainTextResponse)
def generate(
    url_data: URLCreate,
    shortener: Shortener = Depends(get_shortener)
):
    """Create a short URL and answer with the bare short link"""
    try:
        record = shortener.store(url_data.url)
    except ShortenerError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return record.short_url
