"""Compiler wrapper that runs the source file through lambda-pp first.

Usage: lambda-cc [--lambda-pp=<path/to/lambda-pp>] <cc to use> [cc options]

Flag parsing stops at the compiler, so everything from there on is handed to
the compiler untouched.
"""

import os

from absl import app
from absl import flags
from absl import logging

from lambda_cc.rewriter import errors
from lambda_cc.rewriter import invocation

from lambda_cc.util import lambdapp as lambdapp_lib
from lambda_cc.util import shell

FLAGS = flags.FLAGS

flags.DEFINE_string(
    'lambda-pp', None,
    'The path to the lambda-pp executable. Defaults to $LAMBDA_PP or the '
    'first lambda-pp found on $PATH.')
flags.DEFINE_bool(
    'dry_run', False,
    'Print the rewritten command instead of running it through the shell.')

FLAGS.set_gnu_getopt(False)


def get_usage(program_name):
  return (f'usage: {os.path.basename(program_name)} '
          '[--lambda-pp=<path/to/lambda-pp>] <cc to use> [cc options]')


def main(argv):
  arguments = argv[1:]

  lambdapp = FLAGS['lambda-pp'].value
  if lambdapp is None:
    lambdapp = lambdapp_lib.find_lambdapp()

  try:
    # The compiler and at least one of its arguments are required.
    if len(arguments) < 2:
      raise errors.UsageError('Too few arguments')
    if lambdapp is None:
      raise errors.ToolNotFoundError("Couldn't find lambda-pp")
    command = invocation.rewrite_invocation(lambdapp, arguments)
  except errors.UsageError:
    logging.error(get_usage(argv[0]))
    return 1
  except errors.LambdaCcError as rewrite_error:
    logging.error(f'error: {rewrite_error}')
    return 1
  except MemoryError:
    logging.error('error: Out of memory')
    return 1

  if FLAGS.dry_run:
    print(command)
    return 0

  return shell.run_shell_command(command)


def entrypoint():
  app.run(main)


if __name__ == '__main__':
  app.run(main)
