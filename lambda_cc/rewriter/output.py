"""Module for finding the -o pair on a compiler command line."""

import collections

OUTPUT_FLAG = '-o'
DEFAULT_OUTPUT = 'a.out'

OutputDescriptor = collections.namedtuple(
    'OutputDescriptor', ['path', 'flag_index', 'is_defaulted'])


def get_default_output():
  return OutputDescriptor(DEFAULT_OUTPUT, None, True)


def find_output(arguments):
  for index, argument in enumerate(arguments):
    if argument != OUTPUT_FLAG:
      continue
    if index + 1 >= len(arguments):
      # A dangling -o is treated the same as no -o at all.
      return get_default_output()
    return OutputDescriptor(arguments[index + 1], index, False)
  return get_default_output()
