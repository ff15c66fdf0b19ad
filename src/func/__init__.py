"""Functional modules for suffix renaming.

Submodules
----------
model
    Modes, candidates, outcomes and scan errors.
walk
    Directory traversal without following symlinks.
rename
    Eligibility, collision check and the rename run.
progress
    Reporter interface plus logging and progress-bar reporters.
log_utils
    Logger construction for the CLI.
"""
