# actionfsm/core/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Core package: the definition model, actions, errors, hooks, validation and
the synchronous machine runtime.
"""
