"""
Action-oriented command line parsing on top of optparse.

A command declares its actions as {section: {action: {"msg": ..., "options":
[...]}}}. Words on the command line are joined with "_" to form the action
name, and each word can be abbreviated while unambiguous, so "act vol" runs
the "activate_volume" action. Options not declared by the selected action
are refused.
"""
import optparse
import sys
import textwrap

import drbd8store.core.exceptions as ex
from drbd8store import version as pkg_version


class Option(optparse.Option):
    pass


class RaisingOptionParser(optparse.OptionParser):
    """
    An OptionParser raising ex.Error and ex.Version where optparse would
    print and exit, so the command main() decides of the exit code.
    """
    def exit(self, status=0, msg=None):
        raise ex.Error(msg)

    def error(self, msg):
        raise ex.Error(msg)

    def print_version(self, file=None):
        raise ex.Version(self.get_version() if self.version else "")


class OptParser(object):
    def __init__(self, args=None, prog="", options=None, actions=None,
                 global_options=None, width=78):
        self.args = args
        self.prog = prog
        self.version = "%s version %s" % (prog, pkg_version)
        self.options = options or {}
        self.actions = actions or {}
        self.global_options = global_options or []
        self.width = width
        self.parser = self.new_parser(self.options.values())

    def new_parser(self, options, usage=None):
        parser = RaisingOptionParser(
            prog=self.prog,
            usage=usage,
            version=self.version,
            add_help_option=False,
            formatter=optparse.IndentedHelpFormatter(width=self.width),
        )
        for option in options:
            parser.add_option(option)
        return parser

    def action_data(self, action):
        for section_data in self.actions.values():
            if action in section_data:
                return section_data[action]

    def supported_actions(self):
        return sorted(a for section_data in self.actions.values() for a in section_data)

    def next_words(self, prefix):
        """
        Return the set of words that can follow the <prefix> words list in
        a supported action name.
        """
        words = set()
        depth = len(prefix)
        for action in self.supported_actions():
            elements = action.split("_")
            if elements[:depth] == prefix and len(elements) > depth:
                words.add(elements[depth])
        return words

    def develop_action(self, args):
        """
        Return the action name from the command line words, expanding the
        unambiguous abbreviations.
        """
        words = []
        for idx, arg in enumerate(args):
            candidates = self.next_words(words)
            if arg in candidates:
                words.append(arg)
                continue
            matching = [word for word in candidates if word.startswith(arg)]
            if len(matching) != 1:
                return "_".join(words + args[idx:])
            words.append(matching[0])
        return "_".join(words)

    def format_action(self, action, with_options=True):
        data = self.action_data(action)
        buff = "  %s %s\n\n" % (self.prog, action.replace("_", " "))
        buff += textwrap.fill(data["msg"], width=self.width,
                              initial_indent="      ",
                              subsequent_indent="      ") + "\n"
        if with_options:
            options = data.get("options", []) + self.global_options
            buff += "\n" + self.new_parser(options).format_option_help() + "\n"
        return buff

    def format_usage(self, prefix="", with_options=False):
        """
        Return the help message of the actions starting with <prefix>, or of
        all actions if none matches.
        """
        actions = [a for a in self.supported_actions() if a.startswith(prefix)]
        if not actions:
            actions = self.supported_actions()
        buff = "%s [ OPTIONS ] COMMAND\n\n" % self.prog
        for section in sorted(self.actions):
            section_actions = [a for a in actions if a in self.actions[section]]
            if not section_actions:
                continue
            buff += section + "\n" + "-" * len(section) + "\n\n"
            for action in section_actions:
                buff += self.format_action(action, with_options=with_options) + "\n"
        return buff.rstrip("\n")

    def parse_args(self, argv=None):
        """
        Parse argv and return the (options, action) tuple.
        """
        if argv is not None:
            self.args = argv
        else:
            self.args = sys.argv[1:]

        # all options are known to this parser, so the action can be
        # extracted before validating the options against it
        options, args = self.parser.parse_args(self.args)
        if not args:
            if options.parm_help:
                raise ex.Help(self.format_usage(with_options=True))
            raise ex.Error("no action specified\n" + self.format_usage())

        action = self.develop_action(args)
        data = self.action_data(action)
        if data is None:
            raise ex.Error("unsupported action: %s\n%s" % (
                action.replace("_", " "), self.format_usage(action)))
        if options.parm_help:
            raise ex.Help(self.format_usage(action, with_options=True))

        parser = self.new_parser(data.get("options", []) + self.global_options,
                                 usage=self.format_usage(action))
        parser.parse_args(self.args, optparse.Values())
        return options, action
