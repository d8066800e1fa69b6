"""Translation services.

- extractor: find translation keys in source files
- reconciler: compare a dictionary with keys found in source
- dictionary: sort, filter, deduplicate, load and save dictionaries
"""

from lingo.services import dictionary, extractor, reconciler

__all__ = ["dictionary", "extractor", "reconciler"]
