import uvicorn

from pathcomplete.config.settings import settings


def main(argv: list[str] | None = None) -> int:
    # Run FastAPI app from pathcomplete.main:app
    uvicorn.run(
        "pathcomplete.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )  # type: ignore[arg-type]
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
