"""
authkit - Authentication Backend Scaffolder
===========================================

A CLI tool that scaffolds secure, production-ready authentication backends
from a directory of ready-made templates.

Features
--------
- **Template Discovery**: Every subdirectory of the templates root is a template
- **README Metadata**: Name, description and language come from the README
- **Placeholder Substitution**: ``{{PROJECT_NAME}}`` is replaced on copy
- **Pre-flight Checks**: Verify the tools a template needs are installed

Quick Start
-----------
```bash
# See what is available
authkit list

# Details for one template
authkit info express-prisma

# Scaffold a project interactively
authkit init
```

Example
-------
>>> from authkit import TemplateRegistry
>>> registry = TemplateRegistry(Path("templates"))
>>> registry.lookup("express-prisma").language
'TypeScript'

Architecture
------------
- ``cli``: Typer-based command line interface
- ``registry``: Template discovery and README metadata parsing
- ``copier``: Directory copy with placeholder substitution
- ``scaffold``: Interactive ``init`` flow
- ``envcheck``: PATH lookups for required tools
- ``config``: Settings resolution
- ``models``: Pydantic models for templates and settings
- ``errors``: Error taxonomy

License
-------
MIT License - see LICENSE file for details.
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from authkit.copier import PLACEHOLDER, copy_template_dir
from authkit.envcheck import check_env
from authkit.errors import AuthkitError
from authkit.models import AuthkitSettings, Template
from authkit.registry import TemplateRegistry, parse_readme_meta
from authkit.scaffold import ScaffoldResult, run_init


__all__ = [
    "PLACEHOLDER",
    "AuthkitError",
    "AuthkitSettings",
    "ScaffoldResult",
    "Template",
    "TemplateRegistry",
    # Version info
    "__version__",
    # Core functions
    "check_env",
    "copy_template_dir",
    "parse_readme_meta",
    "run_init",
]
