"""Gradio UI module."""
