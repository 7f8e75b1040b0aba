"""UI module for Dokkan Tactician.

Streamlit front end: the main page layout, reusable components, theme
styling and session-state wiring.

Submodules:
    app: Main Streamlit application
    components: Character cards, roster grid, sources and analysis panel
    theme: Visual styling and type colours
    state: TeamSession storage in st.session_state

Usage:
    Run the application with:
        streamlit run src/dokkan_tactician/ui/app.py

    Or import and run programmatically:
        from dokkan_tactician.ui import run_app
        run_app()
"""

from __future__ import annotations


def run_app() -> None:
    """Run the Streamlit application.

    Note: This launches a subprocess running streamlit.
    """
    import subprocess
    import sys
    from pathlib import Path

    app_path = Path(__file__).parent / "app.py"
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(app_path)])


__all__ = [
    "run_app",
]
