"""Ada grammar availability and on-demand installation.

The tree-sitter-ada grammar ships as its own wheel; this keeps the base
install usable for tools that only consume already-parsed trees.
"""

from __future__ import annotations

import importlib
import subprocess
import sys
from importlib.util import find_spec

from adaoutline.config.constants import GRAMMAR_MIN_VERSION, GRAMMAR_MODULE, GRAMMAR_PACKAGE
from adaoutline.core.logging import get_logger

log = get_logger(__name__)


def is_grammar_installed(import_name: str = GRAMMAR_MODULE) -> bool:
    """Check if a grammar package is installed."""
    return find_spec(import_name) is not None


def install_grammar(
    package: str = GRAMMAR_PACKAGE,
    min_version: str = GRAMMAR_MIN_VERSION,
    timeout: float = 300,
) -> bool:
    """Install the grammar package via pip into the running interpreter.

    Returns True if the install succeeded.
    """
    spec = f"{package}>={min_version}"
    cmd = [sys.executable, "-m", "pip", "install", "--quiet", spec]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except subprocess.TimeoutExpired:
        log.error("grammar_install_timeout", package=spec)
        return False
    if result.returncode != 0:
        log.error("grammar_install_failed", package=spec, stderr=result.stderr.strip())
        return False
    importlib.invalidate_caches()
    log.info("grammar_installed", package=spec)
    return True
