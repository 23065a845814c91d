"""Module for composing the final shell command for a compiler invocation."""

import os

from lambda_cc.util import command_buffer

OBJECT_FILE_SUFFIX = '.o'
STDIN_SOURCE = '-'


def get_language_flag(source):
  if source.is_cpp:
    return '-xc++'
  return '-xc'


def get_default_object_path(source):
  # TODO: pick the object suffix per platform (.obj on Windows toolchains).
  return os.path.basename(source.path) + OBJECT_FILE_SUFFIX


def compose_passthrough_command(compiler, arguments):
  """Composes a command that forwards the arguments to the compiler as is.

  This is used when no source file is present, which means the compiler is
  being used to drive the linker.
  """
  shell_buffer = command_buffer.create_buffer()
  command_buffer.append_formatted(shell_buffer, compiler)
  command_buffer.append_arguments(shell_buffer, arguments)
  return command_buffer.render(shell_buffer)


def compose_pipeline_command(lambdapp, compiler, source, output, partitioned):
  """Composes `lambdapp source | compiler -x<lang> ... -`.

  The compiler reads the preprocessed source from stdin. An explicit -o pair
  is re-emitted where it sat in the original command. When compiling only
  with no -o, the object file name is spelled out because the compiler has no
  input file name to derive it from.
  """
  shell_buffer = command_buffer.create_buffer()
  command_buffer.append_formatted(shell_buffer, '%s %s |', lambdapp,
                                  source.path)
  command_buffer.append_formatted(shell_buffer, '%s %s', compiler,
                                  get_language_flag(source))
  command_buffer.append_arguments(shell_buffer, partitioned.before)
  if not output.is_defaulted:
    command_buffer.append_formatted(shell_buffer, '-o %s', output.path)
  command_buffer.append_arguments(shell_buffer, partitioned.after)
  if partitioned.compile_only and output.is_defaulted:
    command_buffer.append_formatted(shell_buffer, '-o %s',
                                    get_default_object_path(source))
  command_buffer.append_formatted(shell_buffer, STDIN_SOURCE)
  return command_buffer.render(shell_buffer)
