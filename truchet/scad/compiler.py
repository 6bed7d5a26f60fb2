"""
OpenSCAD compiler wrapper — runs the openscad CLI for syntax checks and STL export.
"""

from __future__ import annotations
import logging
import os
import shutil
import subprocess
import tempfile
from pathlib import Path

log = logging.getLogger(__name__)

CHECK_TIMEOUT_S = 30
EXPORT_TIMEOUT_S = 600

# Overrides PATH lookup, e.g. for a nightly build with the manifold backend.
OPENSCAD_ENV = "TRUCHET_OPENSCAD"


def find_openscad() -> str | None:
    """Locate the openscad binary."""
    override = os.environ.get(OPENSCAD_ENV)
    if override and Path(override).exists():
        return override
    path = shutil.which("openscad")
    if path:
        return path
    # Common install locations outside PATH
    for candidate in [
        r"C:\Program Files\OpenSCAD\openscad.exe",
        r"C:\Program Files (x86)\OpenSCAD\openscad.exe",
        "/Applications/OpenSCAD.app/Contents/MacOS/OpenSCAD",
    ]:
        if Path(candidate).exists():
            return candidate
    return None


def _run(args: list[str], timeout: int) -> tuple[bool, str]:
    try:
        result = subprocess.run(args, capture_output=True, text=True, timeout=timeout)
    except subprocess.TimeoutExpired:
        return False, f"OpenSCAD timed out ({timeout}s)."
    except OSError as e:
        return False, str(e)
    stderr = result.stderr.strip()
    if result.returncode == 0:
        return True, stderr or "OK"
    return False, stderr or f"OpenSCAD exited with code {result.returncode}"


def check_scad(scad_path: Path) -> tuple[bool, str]:
    """
    Syntax-check an OpenSCAD file without rendering.

    Returns (ok, message).
    """
    exe = find_openscad()
    if not exe:
        return False, "OpenSCAD not found on PATH."
    # .echo export parses the file without building any geometry
    with tempfile.TemporaryDirectory() as tmp:
        echo_path = Path(tmp) / "check.echo"
        return _run([exe, "-o", str(echo_path), str(scad_path)], CHECK_TIMEOUT_S)


def compile_scad(scad_path: Path, stl_path: Path | None = None) -> tuple[bool, str, Path | None]:
    """
    Compile an OpenSCAD file to STL.

    Returns (ok, message, stl_path_or_none).
    """
    exe = find_openscad()
    if not exe:
        return False, "OpenSCAD not found on PATH.", None

    if stl_path is None:
        stl_path = scad_path.with_suffix(".stl")

    log.info("Compiling %s → %s", scad_path.name, stl_path.name)
    ok, message = _run([exe, "-o", str(stl_path), str(scad_path)], EXPORT_TIMEOUT_S)
    if ok and stl_path.exists():
        return True, message, stl_path
    if ok:
        return False, f"OpenSCAD reported success but {stl_path.name} was not written", None
    return False, message, None
