from lambda_cc.rewriter import output
from lambda_cc.rewriter import partition
from lambda_cc.rewriter import source


def partition_command_line(arguments):
  source_descriptor = source.find_source(arguments)
  output_descriptor = output.find_output(arguments)
  return partition.partition_arguments(arguments, source_descriptor,
                                       output_descriptor)


def test_explicit_output_splits_arguments():
  partitioned = partition_command_line(
      ['-Wall', 'foo.c', '-O2', '-o', 'out.bin', '-lm', '-g'])
  assert partitioned.before == ['-Wall', '-O2']
  assert partitioned.after == ['-lm', '-g', '-I.']
  assert not partitioned.compile_only
  for group in (partitioned.before, partitioned.after):
    assert '-o' not in group
    assert 'out.bin' not in group
    assert 'foo.c' not in group


def test_source_after_output_is_excluded():
  partitioned = partition_command_line(['-o', 'prog', '-g', 'main.cpp', '-lm'])
  assert partitioned.before == []
  assert partitioned.after == ['-g', '-lm', '-I.']


def test_defaulted_output_keeps_everything_before():
  partitioned = partition_command_line(['-Wall', 'foo.c', '-O2', '-DX=1'])
  assert partitioned.before == ['-Wall', '-O2', '-DX=1']
  assert partitioned.after == ['-I.']


def test_compile_only_in_either_group():
  assert partition_command_line(['-c', 'foo.c', '-o', 'foo.o']).compile_only
  assert partition_command_line(['foo.c', '-o', 'foo.o', '-c']).compile_only
  assert not partition_command_line(['foo.c', '-o', 'foo']).compile_only


def test_output_named_like_compile_flag_is_not_compile_only():
  assert not partition_command_line(['foo.c', '-o', '-c']).compile_only


def test_include_flag_uses_source_directory():
  partitioned = partition_command_line(['-c', 'src/lib/foo.c'])
  assert partitioned.after == ['-Isrc/lib']

  partitioned = partition_command_line(['-c', '/abs/foo.c'])
  assert partitioned.after == ['-I/abs']

  partitioned = partition_command_line(['-c', '/foo.c'])
  assert partitioned.after == ['-I/']
