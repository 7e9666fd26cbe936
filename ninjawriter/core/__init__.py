# SPDX-License-Identifier: MIT
"""Core value types and syntax primitives for ninjawriter."""
