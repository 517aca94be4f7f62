#
# Copyright (c) 2023 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#

"""
Command-line interface to the UFM InfiniBand partition API.
"""

import argparse
import logging
import sys

import httplib2
from oslo_utils import strutils

import ufmclient
from ufmclient._i18n import _
from ufmclient import client as ufm_client
from ufmclient.common import utils
from ufmclient import exc
from ufmclient.resources import partition_shell
from ufmclient.resources import version_shell

COMMAND_MODULES = [
    partition_shell,
    version_shell,
]


class UFMShell(object):

    def get_base_parser(self):
        parser = argparse.ArgumentParser(
            prog='ufm',
            description=__doc__.strip(),
            epilog='See "ufm help COMMAND" '
                   'for help on a specific command.',
            add_help=False,
            formatter_class=utils.HelpFormatter,
        )

        # Global arguments
        parser.add_argument('-h', '--help',
                            action='store_true',
                            help=argparse.SUPPRESS,
                            )

        parser.add_argument('--version',
                            action='version',
                            version=ufmclient.__version__)

        parser.add_argument('--debug',
                            default=bool(utils.env('UFMCLIENT_DEBUG')),
                            action='store_true',
                            help='Defaults to env[UFMCLIENT_DEBUG]')

        parser.add_argument('--ufm-address',
                            default=utils.env('UFM_ADDRESS'),
                            help='UFM address, e.g. https://ufm.example.com. '
                                 'Defaults to env[UFM_ADDRESS]')

        parser.add_argument('--ufm-username',
                            default=utils.env('UFM_USERNAME'),
                            help='Defaults to env[UFM_USERNAME]')

        parser.add_argument('--ufm-password',
                            default=utils.env('UFM_PASSWORD'),
                            help='Defaults to env[UFM_PASSWORD]')

        parser.add_argument('--ufm-token',
                            default=utils.env('UFM_TOKEN'),
                            help='Access token, used when no username is '
                                 'given. Defaults to env[UFM_TOKEN]')

        parser.add_argument('-k', '--insecure',
                            default=strutils.bool_from_string(
                                utils.env('UFM_INSECURE')),
                            action='store_true',
                            help="Explicitly allow ufmclient to perform "
                                 "\"insecure\" SSL (https) requests. The "
                                 "server's certificate will not be verified "
                                 "against any certificate authorities. This "
                                 "option should be used with caution. "
                                 "Defaults to env[UFM_INSECURE]")

        parser.add_argument('--ca-file',
                            default=utils.env('UFM_CA_FILE'),
                            help='Path of CA SSL certificate(s) used to verify '
                                 'the remote server certificate. Defaults to '
                                 'env[UFM_CA_FILE]')

        parser.add_argument('--timeout',
                            default=600,
                            type=float,
                            help='Number of seconds to wait for a response')

        return parser

    def get_subcommand_parser(self):
        parser = self.get_base_parser()

        self.subcommands = {}
        subparsers = parser.add_subparsers(metavar='<subcommand>')
        for command_module in COMMAND_MODULES:
            utils.define_commands_from_module(subparsers, command_module,
                                              self.subcommands)
        utils.define_commands_from_module(subparsers, self, self.subcommands)
        return parser

    def _setup_debugging(self, debug):
        if debug:
            logging.basicConfig(
                format="%(levelname)s (%(module)s:%(lineno)d) %(message)s",
                level=logging.DEBUG)
            httplib2.debuglevel = 1
        else:
            logging.basicConfig(format="%(levelname)s %(message)s",
                                level=logging.WARNING)

    def _get_config(self, args):
        if not args.ufm_address:
            raise exc.CommandError(_("You must provide a UFM address via "
                                     "either --ufm-address or "
                                     "env[UFM_ADDRESS]"))

        if not args.ufm_username and not args.ufm_token:
            raise exc.CommandError(_("You must provide a username via "
                                     "either --ufm-username or "
                                     "env[UFM_USERNAME], or a token via "
                                     "either --ufm-token or env[UFM_TOKEN]"))

        return ufm_client.UFMConfig(address=args.ufm_address,
                                    username=args.ufm_username or None,
                                    password=args.ufm_password or None,
                                    token=args.ufm_token or None,
                                    insecure=args.insecure,
                                    timeout=args.timeout,
                                    ca_file=args.ca_file or None)

    def main(self, argv):
        # Parse args once to find the debug flag
        parser = self.get_base_parser()
        (options, args) = parser.parse_known_args(argv)
        self._setup_debugging(options.debug)

        subcommand_parser = self.get_subcommand_parser()
        self.parser = subcommand_parser

        if options.help or not argv:
            self.do_help(options)
            return 0

        # Parse args again and call whatever callback was selected
        args = subcommand_parser.parse_args(argv)

        # Global options alone select no subcommand
        if getattr(args, 'func', None) is None:
            self.do_help(args)
            return 0

        # Short-circuit and deal with help command right away.
        if args.func == self.do_help:
            self.do_help(args)
            return 0

        cc = ufm_client.get_client(self._get_config(args))
        args.func(cc, args)
        return 0

    @utils.arg('command', metavar='<subcommand>', nargs='?',
               help='Display help for <subcommand>')
    def do_help(self, args):
        """Display help about this program or one of its subcommands."""
        if getattr(args, 'command', None):
            if args.command in self.subcommands:
                self.subcommands[args.command].print_help()
            else:
                raise exc.CommandError("'%s' is not a valid subcommand" %
                                       args.command)
        else:
            self.parser.print_help()


def main():
    try:
        return UFMShell().main(sys.argv[1:])

    except KeyboardInterrupt:
        print("... terminating ufm client", file=sys.stderr)
        sys.exit(130)
    except (exc.UFMError, exc.CommandError) as e:
        utils.exit('ERROR: %s' % e)


if __name__ == "__main__":
    sys.exit(main())
