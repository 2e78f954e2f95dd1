"""
Detecting the library's own version.

The codebase does not contain the version directly: the releases depend
on the git tags (via ``setuptools_scm``) rather than in-code version bumps.

The version is determined only once at startup when the code is loaded.
"""
from typing import Optional

version: Optional[str] = None

try:
    import importlib.metadata
except ImportError:
    pass
else:
    try:
        name, *_ = __name__.split('.')  # usually "kubeext", unless renamed/forked.
        version = importlib.metadata.version(name)
    except importlib.metadata.PackageNotFoundError:
        pass  # running from a source tree without installation.
