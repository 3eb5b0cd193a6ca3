"""FastAPI app: /health, /analyze, /catalog, /fix, /community."""

from deps import CORSMiddleware, FastAPI
from .config import get_host, get_port
from .routes import analyze_router, catalog_router, community_router, fix_router, health_router
from .startup import configure_logging, validate_config
from .utils import checker_svc

app = FastAPI(
    title="Baseline Compatibility Checker API",
    description="Detects web-platform features in scripts, stylesheets and markup and scores browser compatibility.",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(analyze_router)
app.include_router(catalog_router)
app.include_router(fix_router)
app.include_router(community_router)


@app.on_event("startup")
async def _load_data() -> None:
    """Validate config, then fetch remote data (or fall back) before serving requests."""
    configure_logging()
    validate_config()
    await checker_svc.load_remote_data()


def run() -> None:
    import uvicorn

    uvicorn.run("app.main:app", host=get_host(), port=get_port())


if __name__ == "__main__":
    run()
