# -*- coding: utf-8 -*-
"""
Modules for the qbank2tex scripts - JSON question bank to LaTeX converters

This package contains modules for collecting questions from nested JSON
question banks, escaping their text for LaTeX, writing per-question fragment
files, grouping questions into chapter/section files, and inspecting or
converting SVG figures for the same document.

Date: 2026-10-19
"""
