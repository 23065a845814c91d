"""Errors raised while rewriting a compiler invocation."""


class LambdaCcError(Exception):
  pass


class UsageError(LambdaCcError):
  pass


class ToolNotFoundError(LambdaCcError):
  pass


class CompilerSpecMalformedError(LambdaCcError):
  pass
