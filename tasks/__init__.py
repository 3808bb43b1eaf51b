# Project-wide periodic jobs; app-specific tasks live in apps/<app>/tasks.py
