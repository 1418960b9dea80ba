"""Task modules live here.

Each module declares one or more build steps with
`@orchestrator.task(name=..., inputs=[...], outputs=[...])`; the CLI discovers them
by importing every module in this package.

Do not implement logic here unless it's shared helpers; keep tasks modular per file.
"""
