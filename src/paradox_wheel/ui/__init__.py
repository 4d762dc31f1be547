"""UI module for The Paradox Wheel.

This module provides the Streamlit-based user interface: the grimoire,
saved characters, the character creation wizard, the merits & flaws
catalogue and the admin panel.

Submodules:
    app: Main Streamlit application
    components: Reusable UI components
    theme: Visual styling and theming

Usage:
    Run the application with:
        streamlit run src/paradox_wheel/ui/app.py

    Or import and run programmatically:
        from paradox_wheel.ui import run_app
        run_app()
"""

from __future__ import annotations


def run_app() -> None:
    """Run the Streamlit application.

    This launches a subprocess running streamlit.
    """
    import subprocess
    import sys
    from pathlib import Path

    app_path = Path(__file__).parent / "app.py"
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(app_path)])


__all__ = [
    "run_app",
]
