"""Module that turns a wrapped compiler command line into a shell command."""

import logging

from lambda_cc.rewriter import compiler_spec
from lambda_cc.rewriter import composer
from lambda_cc.rewriter import errors
from lambda_cc.rewriter import output
from lambda_cc.rewriter import partition
from lambda_cc.rewriter import source

from lambda_cc.util import shell


def rewrite_invocation(lambdapp, arguments):
  parsed_compiler = compiler_spec.parse_compiler_spec(arguments)
  compiler_arguments = arguments[parsed_compiler.consumed_arg_count:]
  if not compiler_arguments:
    raise errors.UsageError('No compiler arguments were specified')

  source_descriptor = source.find_source(compiler_arguments)
  if source_descriptor is None:
    logging.debug('No source file found, passing the command through.')
    return composer.compose_passthrough_command(parsed_compiler.executable,
                                                compiler_arguments)

  output_descriptor = output.find_output(compiler_arguments)
  partitioned_arguments = partition.partition_arguments(
      compiler_arguments, source_descriptor, output_descriptor)
  pipeline_command = composer.compose_pipeline_command(
      lambdapp, parsed_compiler.executable, source_descriptor,
      output_descriptor, partitioned_arguments)
  return shell.sanitize_command(pipeline_command)
