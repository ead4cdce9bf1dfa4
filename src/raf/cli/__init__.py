"""Command-line interface for raf."""

from __future__ import annotations

from raf import create_draft as create_draft
from raf import list_entries as list_entries
from raf import load_config as load_config
from raf.cli.app import main as main
from raf.cli.commands import ls as ls_command
from raf.cli.commands import new as new_command
from raf.cli.parser import build_parser as build_parser
from raf.cli.prompts import QuestionaryPrompter as QuestionaryPrompter

_run_new = new_command.run_new
_run_ls = ls_command.run_ls
