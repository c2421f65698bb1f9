#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/shared/errors.py


class TonelabError(Exception):
    """Base class for every error raised by tonelab."""


class UnknownColorError(TonelabError, ValueError):
    """A string is neither a valid hex code nor a known color name."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"unknown color: '{value}'")


class UnknownSpaceError(TonelabError, ValueError):
    """A working space name is not one of the supported spaces."""

    def __init__(self, space, supported):
        self.space = space
        self.supported = tuple(supported)
        super().__init__(
            f"unknown color space: '{space}' (expected one of: {', '.join(self.supported)})"
        )


class ConvergenceError(TonelabError):
    """Raised by strict iteration when the step cap is reached."""

    def __init__(self, steps: int, last: str):
        self.steps = steps
        self.last = last
        super().__init__(f"no convergence after {steps} steps (last color {last})")
