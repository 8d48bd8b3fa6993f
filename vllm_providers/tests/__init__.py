"""Test suite for the vLLM chat adapter."""
