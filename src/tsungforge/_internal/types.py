"""Shared type aliases for tsungforge."""

from __future__ import annotations

# POST body fields, rendered form-url-encoded.
FormData = dict[str, str]

# Durations, rates and think-times accept ints or floats.
Number = int | float
