"""FastAPI server hosting the tic-tac-toe page."""

import logging
from pathlib import Path
from string import Template
from typing import Optional

from fastapi import FastAPI, Path as PathParam
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field

from tictactoe.board import CELL_COUNT
from tictactoe.config import AppConfig
from tictactoe.orchestrator import GameController

logger = logging.getLogger(__name__)

DEFAULT_CLIENT_PATH = Path(__file__).parent.parent.parent / "client"

FALLBACK_PAGE = Template(
    "<!DOCTYPE html><html><head><title>$title</title></head>"
    '<body><div id="$root_id">$game</div></body></html>'
)


class ClickRequest(BaseModel):
    """Request body for a cell click."""
    index: int = Field(ge=0, le=CELL_COUNT - 1)


class JumpRequest(BaseModel):
    """Request body for a history jump."""
    move: int = Field(ge=0)


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    config = config or AppConfig()
    app = FastAPI(title=config.title)
    controller = GameController()

    client_path = Path(config.client_dir) if config.client_dir else DEFAULT_CLIENT_PATH
    index_path = client_path / "index.html"
    if client_path.exists():
        app.mount("/static", StaticFiles(directory=str(client_path)), name="static")
    else:
        logger.warning("Client directory %s not found, serving bare page", client_path)

    def build_state_message(extra: dict = None) -> dict:
        msg = {"status": "ok", "state": controller.to_dict()}
        if extra:
            msg.update(extra)
        return msg

    def render_page() -> str:
        template = Template(index_path.read_text()) if index_path.exists() else FALLBACK_PAGE
        return template.safe_substitute(
            title=config.title,
            root_id=config.root_id,
            game=controller.render(),
        )

    def back_to_page() -> RedirectResponse:
        return RedirectResponse(url="/", status_code=303)

    # ==================== Page ====================

    @app.get("/", response_class=HTMLResponse)
    async def get_index():
        """Serve the page with the game mounted in the root container."""
        return HTMLResponse(render_page())

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.post("/cell/{index}")
    async def click_cell_form(index: int = PathParam(ge=0, le=CELL_COUNT - 1)):
        controller.handle_click(index)
        return back_to_page()

    @app.post("/jump/{move}")
    async def jump_form(move: int = PathParam(ge=0)):
        if controller.can_jump_to(move):
            controller.jump_to(move)
        else:
            logger.warning("Jump to unknown move %d ignored", move)
        return back_to_page()

    @app.post("/new-game")
    async def new_game_form():
        controller.reset()
        return back_to_page()

    # ==================== JSON API ====================

    @app.get("/api/state")
    async def get_state():
        """Get current game state."""
        return build_state_message()

    @app.post("/api/click")
    async def click_cell(request: ClickRequest):
        """Click a cell. Occupied cells and finished games leave the state as is."""
        applied = controller.handle_click(request.index)
        return build_state_message({"applied": applied})

    @app.post("/api/jump")
    async def jump_to(request: JumpRequest):
        """Move the history pointer."""
        if not controller.can_jump_to(request.move):
            return {"status": "error", "message": f"Move {request.move} not found"}
        controller.jump_to(request.move)
        return build_state_message()

    @app.post("/api/new-game")
    async def new_game():
        """Discard the current game and start from an empty board."""
        controller.reset()
        return build_state_message()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    config = AppConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(config), host=config.host, port=config.port)
