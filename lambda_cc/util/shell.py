"""Utilities for handing composed command lines to the shell."""

import logging
import subprocess


def sanitize_command(command):
  """Escapes double quotes so they survive the shell as literal characters.

  This is not a general purpose shell escaper. Any other shell metacharacters
  inside the command are passed through untouched.
  """
  return command.replace('"', '\\"')


def run_shell_command(command):
  logging.debug(f'Running {command}')
  shell_process = subprocess.run(command, shell=True)
  if shell_process.returncode != 0:
    logging.debug(f'Command exited with {shell_process.returncode}')
  return shell_process.returncode
