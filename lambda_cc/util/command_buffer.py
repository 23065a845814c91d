"""A small append-only buffer for assembling shell command lines."""

SEPARATOR = ' '


def create_buffer():
  return []


def append_formatted(command_buffer, format_string, *format_arguments):
  if format_arguments:
    command_buffer.append(format_string % format_arguments)
  else:
    command_buffer.append(format_string)


def append_arguments(command_buffer, arguments):
  for argument in arguments:
    command_buffer.append(argument)


def render(command_buffer):
  # Empty parts are dropped so that empty groups never leave a stray separator.
  rendered_command = SEPARATOR.join(part for part in command_buffer if part)
  return rendered_command.rstrip(SEPARATOR)
