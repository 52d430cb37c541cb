"""
Core package for the survey insights dashboard.

Submodules provide the survey data source, response filtering and CSV export,
summary statistics, and the Streamlit user interface orchestrated by the
top-level `app.py`.
"""
