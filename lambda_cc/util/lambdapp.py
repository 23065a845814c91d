"""Utilities for locating the lambda-pp executable."""

import os
import stat
import logging

LAMBDAPP_NAME = 'lambda-pp'
LAMBDAPP_ENV_VARIABLE = 'LAMBDA_PP'
DEFAULT_SEARCH_PATH = '.:/bin:/usr/bin:lambdapp'


def is_user_executable(path):
  try:
    path_stat = os.stat(path)
  except OSError:
    return False
  return bool(path_stat.st_mode & stat.S_IXUSR)


def find_lambdapp(environment=None):
  if environment is None:
    environment = os.environ

  if environment.get(LAMBDAPP_ENV_VARIABLE):
    return environment[LAMBDAPP_ENV_VARIABLE]

  search_path = environment.get('PATH') or DEFAULT_SEARCH_PATH
  for search_dir in search_path.split(':'):
    if not search_dir:
      continue
    candidate_path = f'{search_dir}/{LAMBDAPP_NAME}'
    if is_user_executable(candidate_path):
      logging.debug(f'Found {LAMBDAPP_NAME} at {candidate_path}')
      return candidate_path
  return None
