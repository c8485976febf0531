import logging
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from shorten_app.dependencies import get_shortener
from shorten_app.exceptions import ShortenerError
from shorten_app.services.shortener import Shortener

logger = logging.getLogger(__name__)

router = APIRouter(tags=["redirect"])


@router.get("/{short_id}")
def redirect_to_original_url(
    short_id: str,
    shortener: Shortener = Depends(get_shortener)
):
    """
    Redirect to the original URL.

    Each successful redirect counts one visit. Unknown ids (and store
    failures) send the browser to the error page instead of a bare 404.
    """
    try:
        record = shortener.read(short_id)
    except ShortenerError as e:
        logger.info("Redirect for %r failed: %s", short_id, e)
        return RedirectResponse(
            url=f"/ui/error?{urlencode({'msg': str(e)})}",
            status_code=status.HTTP_302_FOUND
        )

    return RedirectResponse(url=record.original_url, status_code=status.HTTP_302_FOUND)
