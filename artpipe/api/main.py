import io

from fastapi import Depends, FastAPI, HTTPException, Response

from artpipe.config import Settings, load_settings
from artpipe.errors import ExternalCommandError, ReadError, SpawnError
from artpipe.output.printer import OutputPrinter
from artpipe.pipeline import run

app = FastAPI(title="artpipe")


def get_settings() -> Settings:
    return load_settings()


@app.get("/health")
def health_check() -> dict:
    return {"status": "ok"}


@app.get("/render")
def render(settings: Settings = Depends(get_settings)) -> Response:
    sink = io.BytesIO()
    try:
        run(settings, OutputPrinter(sink))
    except ReadError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    except (SpawnError, ExternalCommandError) as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return Response(content=sink.getvalue(), media_type="text/plain")
