"""Typeahead core — Capability selection, retrieval strategies, normalization and orchestration."""
