"""Module for finding the translation unit on a compiler command line."""

import collections

C_SOURCE_EXTENSIONS = ['.c', '.C']

CPP_SOURCE_EXTENSIONS = [
    '.cc', '.cx', '.cxx', '.cpp', '.CC', '.CX', '.CXX', '.CPP'
]

SourceDescriptor = collections.namedtuple('SourceDescriptor',
                                          ['path', 'index', 'is_cpp'])


def get_source_language(argument):
  """Returns 'c' or 'c++' for a recognized source file name, None otherwise.

  A name only counts when it ends with the extension, so foo.c.bak and
  foo.candy are rejected while a.c.c and archive.tar.c are accepted.
  """
  for extension in C_SOURCE_EXTENSIONS:
    if argument.endswith(extension):
      return 'c'
  for extension in CPP_SOURCE_EXTENSIONS:
    if argument.endswith(extension):
      return 'c++'
  return None


def find_source(arguments):
  # The leftmost recognized token wins even if several tokens would match.
  for index, argument in enumerate(arguments):
    language = get_source_language(argument)
    if language is None:
      continue
    return SourceDescriptor(argument, index, language == 'c++')
  return None
