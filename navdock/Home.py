from pathlib import Path
import sys

if __package__ in {None, ""}:
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)

from navdock.bootstrap import ensure_streamlit_entrypoint

_PROJECT_ROOT = ensure_streamlit_entrypoint(__file__)

__doc__ = """Streamlit entrypoint rendering the current screen and the navigation surface."""

from navdock.modules import shell


def render_page() -> None:
    """Render the screen for the current location plus the bar or rail."""

    shell.render_app()


if __name__ == "__main__":  # pragma: no cover - Streamlit entrypoint
    render_page()
