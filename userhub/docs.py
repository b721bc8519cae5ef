"""
OpenAPI document generation
Renders the service's API description to a static JSON file
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union
from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
import logging

from userhub.core.config import settings

logger = logging.getLogger(__name__)


def build_openapi_document(app: FastAPI) -> Dict[str, Any]:
    """
    Build the OpenAPI document for `app`, titled from settings and
    pointing at the locally configured port.
    """
    return get_openapi(
        title=settings.PROJECT_NAME,
        version=app.version,
        description=settings.PROJECT_DESCRIPTION,
        routes=app.routes,
        servers=[{"url": f"http://localhost:{settings.PORT}"}],
    )


def write_openapi_document(
    app: FastAPI,
    output_file: Optional[Union[str, Path]] = None
) -> Path:
    """Write the OpenAPI document as JSON and return the path written"""
    path = Path(output_file or settings.OPENAPI_OUTPUT_FILE)
    path.parent.mkdir(parents=True, exist_ok=True)

    document = build_openapi_document(app)
    path.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")

    logger.info(f"Wrote OpenAPI document with {len(document.get('paths', {}))} paths to {path}")
    return path
