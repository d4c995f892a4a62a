"""
Utility helpers for voting-station round planning.

These modules sit around the clustering core:

• Great-circle distances between stations (`distance.py`).
• Command-line interface helpers (`cli.py`).
• File I/O (`data_processing.py`, `save_results.py`).
• Logging colour codes and progress bars (`logging.py`).
"""
