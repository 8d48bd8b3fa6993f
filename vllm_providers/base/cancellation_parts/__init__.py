"""Cancellation parts: one class per module, re-exported by ``base.cancellation``."""
