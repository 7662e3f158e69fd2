from .scan import router as scan_router
from .pairing import router as pairing_router
from .embeddings import router as embeddings_router

__all__ = ["scan_router", "pairing_router", "embeddings_router"]
