"""
Output sinks: where expanded characters go.

The expander only ever appends one character at a time, and it does not care
whether those characters end up in the program's result or in a private buffer
that some builtin wants back as a value. Two realizations cover everything:

* ResultSink appends to an accumulator owned by whoever runs the whole pass.
  That accumulator only turns into visible output once the pass has succeeded.
* CaptureSink owns its buffer, for sub-expansions whose result is needed as a
  string (such as the second argument of \\expandafter).
"""

from abc import ABC, abstractmethod

class OutputSink(ABC):

	@abstractmethod
	def append(self, char:str):
		""" Accept exactly one character of expanded text. """

	def extend(self, text:str):
		for char in text: self.append(char)


class ResultSink(OutputSink):
	def __init__(self, accumulator:list):
		self.accumulator = accumulator

	def append(self, char:str):
		self.accumulator.append(char)


class CaptureSink(OutputSink):
	def __init__(self):
		self.__buffer = []

	def append(self, char:str):
		self.__buffer.append(char)

	def getvalue(self) -> str:
		return ''.join(self.__buffer)
