# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
snykclose CLI

Usage:
    snykclose                         # Scan, report, confirm, close
    snykclose --dry-run               # Scan and report only
    snykclose --config repos.json -y  # Close without prompting
"""
