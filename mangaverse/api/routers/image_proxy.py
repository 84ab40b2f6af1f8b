"""
Image proxy API endpoint.

Routes: GET /image-proxy?url=<encoded image URL>

Dependencies: mangaverse.boundary.catalog.image_proxy
System role: Same-origin delivery of catalog cover and page images
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from mangaverse.api.deps import get_image_fetcher
from mangaverse.boundary.catalog.image_proxy import ImageProxyFetcher

router = APIRouter(tags=["image-proxy"])


@router.get("/image-proxy", response_class=Response)
async def image_proxy(
    url: str | None = None,
    fetcher: ImageProxyFetcher = Depends(get_image_fetcher),
) -> Response:
    """
    Stream an allow-listed catalog image, or a placeholder.

    Never fails: missing, disallowed or unreachable images are answered with
    a short-lived placeholder so <img> tags always render.
    """
    image = await fetcher.fetch(url)
    return Response(
        content=image.content,
        media_type=image.media_type,
        headers={
            "Cache-Control": f"public, max-age={image.max_age}",
            "Access-Control-Allow-Origin": "*",
        },
    )
