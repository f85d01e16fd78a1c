"""Base adapter interface — Abstract classes for typeahead category adapters."""

from typeahead.adapters.base.adapter import DEFAULT_LIMIT, CategoryAdapter, is_blank
from typeahead.adapters.base.exceptions import CategoryRetrievalError

__all__ = ["DEFAULT_LIMIT", "CategoryAdapter", "CategoryRetrievalError", "is_blank"]
