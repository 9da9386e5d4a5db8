# SPDX-License-Identifier: Apache-2.0
"""Error definitions for font size fitting."""

from __future__ import annotations


class TextFitError(ValueError):
    """Base exception for text fitting errors."""

    pass


class InvalidConfiguration(TextFitError):
    """Invalid fitting parameters (delta, min_size_factor).

    Raised only while building a configuration.
    """

    pass


class InvalidInput(TextFitError):
    """Invalid calculation input (coordinates, texts, bounding box).

    Raised before any computation takes place.
    """

    pass
