"""Workflow components behind the hit CLI.

- Pure naming helpers (slugs, branch names, commit messages, clone specs)
- A git adapter with a subprocess-backed implementation
- GitHub issue lookups
- The command set and its argparse entrypoint
"""
