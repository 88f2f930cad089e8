"""Gradio user interface for Gemini Creative Suite.

Entry point: ``creative_suite.ui.app:main`` (installed as ``creative-suite``).
"""
