#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

import argparse
import os
import sys

from oslo_utils import strutils
import prettytable
import yaml


class HelpFormatter(argparse.HelpFormatter):
    def start_section(self, heading):
        # Title-case the headings
        heading = '%s%s' % (heading[0].upper(), heading[1:])
        super(HelpFormatter, self).start_section(heading)


def define_command(subparsers, command, callback, cmd_mapper):
    '''Define a command in the subparsers collection.

    :param subparsers: subparsers collection where the command will go
    :param command: command name
    :param callback: function that will be used to process the command
    '''
    desc = callback.__doc__ or ''
    help = desc.strip().split('\n')[0]
    arguments = getattr(callback, 'arguments', [])

    subparser = subparsers.add_parser(command, help=help,
                                      description=desc,
                                      add_help=False,
                                      formatter_class=HelpFormatter)
    subparser.add_argument('-h', '--help', action='help',
                           help=argparse.SUPPRESS)

    cmd_mapper[command] = subparser
    for (args, kwargs) in arguments:
        subparser.add_argument(*args, **kwargs)
    subparser.set_defaults(func=callback)


def define_commands_from_module(subparsers, command_module, cmd_mapper):
    '''Find all methods beginning with 'do_' in a module, and add them
    as commands into a subparsers collection.
    '''
    for method_name in (a for a in dir(command_module) if a.startswith('do_')):
        # Commands should be hypen-separated instead of underscores.
        command = method_name[3:].replace('_', '-')
        callback = getattr(command_module, method_name)
        define_command(subparsers, command, callback, cmd_mapper)


# Decorator for cli-args
def arg(*args, **kwargs):
    def _decorator(func):
        # Because of the sematics of decorator composition if we just append
        # to the options list positional options will appear to be backwards.
        func.__dict__.setdefault('arguments', []).insert(0, (args, kwargs))
        return func

    return _decorator


def default_printer(s):
    print(s)


def print_list(objs, fields, field_labels, formatters={}, sortby=0,
               reversesort=False, printer=default_printer,
               output_format=None):

    if output_format == 'yaml' or output_format == 'value':
        my_dict_list = []
        for o in objs:
            my_dict_list.append(dict((k, _field_value(o, k, formatters))
                                     for k in fields))

        if output_format == 'yaml':
            printer(yaml.safe_dump(my_dict_list, default_flow_style=False))

        elif output_format == 'value':
            for _dict in my_dict_list:
                print_dict_value(_dict, printer=printer)

    else:
        pt = prettytable.PrettyTable(field_labels)
        pt.align = 'l'
        rows = [[_field_value(o, f, formatters) for f in fields]
                for o in objs]
        if sortby is not None:
            rows.sort(key=lambda r: str(r[sortby]), reverse=reversesort)
        for row in rows:
            pt.add_row(row)
        printer(pt.get_string())


def _field_value(obj, field, formatters):
    if field in formatters:
        return formatters[field](obj)
    return getattr(obj, field, '')


def print_dict_with_format(data, output_format=None, printer=default_printer):
    if output_format == 'yaml':
        printer(yaml.safe_dump(data, default_flow_style=False))

    elif output_format == 'value':
        print_dict_value(data, printer=printer)

    else:
        print_dict(data, printer=printer)


def print_dict_value(d, printer=default_printer):
    # Print values on a single line separated by spaces
    # e.g. '0x7fff management True'
    printer(' '.join(map(str, d.values())))


def print_dict(d, dict_property="Property", printer=default_printer):
    pt = prettytable.PrettyTable([dict_property, 'Value'])
    pt.align = 'l'
    for k, v in d.items():
        pt.add_row([k, v])
    printer(pt.get_string())


def string_to_bool(arg):
    try:
        return strutils.bool_from_string(arg, strict=True)
    except ValueError:
        raise argparse.ArgumentTypeError('invalid boolean value: %s' % arg)


def env(*vars, **kwargs):
    """Search for the first defined of possibly many env vars

    Returns the first environment variable defined in vars, or
    returns the default defined in kwargs.
    """
    for v in vars:
        value = os.environ.get(v, None)
        if value:
            return value
    return kwargs.get('default', '')


def exit(msg=''):
    if msg:
        print(msg, file=sys.stderr)
    sys.exit(1)
