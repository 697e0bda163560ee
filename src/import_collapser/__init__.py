from __future__ import annotations

"""
Import Collapser.

Static analysis of JavaScript/TypeScript module-import graphs: dependency
trees, cumulative byte size, package usage and import chains.
"""

__version__ = "1.0.3"
