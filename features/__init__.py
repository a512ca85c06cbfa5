"""
Features package — each sub-package encapsulates a self-contained feature.

Convention:
  features/<feature_name>/
    __init__.py      — public API re-exports
    controller.py    — transient UI state, submit and voice handling
    ...              — any other feature-specific modules

features/common.py holds the controller base class; features/voice and
features/shell are the cross-feature voice and routing layers.
"""
