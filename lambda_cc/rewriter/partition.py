"""Module for splitting compiler arguments around the -o pair."""

import collections
import os

COMPILE_ONLY_FLAG = '-c'

PartitionedArgs = collections.namedtuple('PartitionedArgs',
                                         ['before', 'after', 'compile_only'])


def get_include_flag(source_path):
  # The compiler reads the preprocessed source from stdin, so relative
  # includes need the original directory on the search path.
  source_dir = os.path.dirname(source_path)
  if not source_dir:
    source_dir = '.'
  return f'-I{source_dir}'


def partition_arguments(arguments, source, output):
  if output.is_defaulted:
    split_index = len(arguments)
  else:
    split_index = output.flag_index

  before = []
  for index in range(0, split_index):
    if index == source.index:
      continue
    before.append(arguments[index])

  after = []
  if not output.is_defaulted:
    for index in range(output.flag_index + 2, len(arguments)):
      if index == source.index:
        continue
      after.append(arguments[index])

  compile_only = COMPILE_ONLY_FLAG in before or COMPILE_ONLY_FLAG in after

  after.append(get_include_flag(source.path))

  return PartitionedArgs(before, after, compile_only)
