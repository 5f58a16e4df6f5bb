"""Streamlit presentation layer for Dig & Bust."""
