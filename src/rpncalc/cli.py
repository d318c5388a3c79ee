from argparse import ArgumentParser
import sys

from prompt_toolkit import PromptSession

from .session import Session


class InteractiveInput:
    '''
    Lines typed at a terminal, prompt_toolkit editing and all.
    '''
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    # In-memory only; nothing persists
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Would interfere with X11 selection.
                                    mouse_support=False,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class QuietArgumentParser(ArgumentParser):
    '''
    Argument parser that, on bad arguments, exits successfully and silently.
    '''
    def error(self, message):
        self.exit(0)


class CLI:
    '''
    Command line interface to RPN system.

    No arguments: interactive. -b: batch. Anything else: do nothing.
    '''

    DEFAULT_PROMPT = '> '

    def interactive(self):
        '''
        Run machine, rendering the stack after every line.
        '''
        session = Session()
        for line in self._prompting_input():
            session.process(line)
            if not session.running:
                break
            session.render()

    def batch(self):
        '''
        Run machine over all of stdin, rendering the stack once at the end.
        '''
        session = Session()
        for line in self._lines(sys.stdin):
            session.process(line)
            if not session.running:
                break
        session.render()

    def _prompting_input(self):
        '''
        Return lines of stdin, each read after a prompt.

        Through prompt_toolkit if both stdin/out are a tty.
        '''
        if sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.DEFAULT_PROMPT)
        else:
            return self._prompted(self._lines(sys.stdin),
                                  prompt=self.DEFAULT_PROMPT)

    def _prompted(self, it, prompt):
        '''
        Wrap input stream with a prompt before each.
        '''
        print(prompt, flush=True, end='')
        for i in it:
            yield i
            print(prompt, flush=True, end='')
        # Don't leave the last prompt dangling
        print()

    def _lines(self, stream):
        '''
        Yield lines of stream, line terminators stripped.
        '''
        for line in stream:
            yield line.rstrip('\r\n')

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = QuietArgumentParser(description='RPN calculator',
                                                   add_help=False,
                                                   allow_abbrev=False)
        self.argument_parser.add_argument('-b',
                                          action='count',
                                          default=0,
                                          dest='batch')

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the command line's.
        '''
        self.args = self.argument_parser.parse_args(args)
        # -b -b, -bb
        if self.args.batch > 1:
            return
        action = self.batch if self.args.batch else self.interactive
        try:
            action()
        except KeyboardInterrupt:
            sys.exit(1)


def main(args=None):
    CLI().run(args=args)
