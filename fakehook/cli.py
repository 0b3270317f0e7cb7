import argparse
import json
import logging
import sys

from pydantic.v1 import ValidationError

from fakehook.config import FakehookConfig
from fakehook.generators import generate_people
from fakehook.webhooks import webhook_service_factory, WebhookError, WebhookProvider, WebhookSiteService

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class Cli:
    """Command line interface for generating fake people and sending them to a webhook."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self):
        parser = argparse.ArgumentParser(
            prog='fakehook',
            description="Generate fake people and POST them to a webhook for inspection."
        )
        parser.add_argument(
            '--env-files',
            type=str,
            action='append',
            help="Path to an environment file. Repeat to load several.",
            default=None
        )
        parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging.")

        subparsers = parser.add_subparsers(dest="command", help="Subcommand to run")

        generate = subparsers.add_parser('generate', help="Print fake people as JSON.")
        self._add_generation_arguments(generate)
        generate.add_argument('--indent', type=int, default=2, help="JSON indentation.")

        send = subparsers.add_parser('send', help="Generate fake people and POST them to a webhook.")
        self._add_generation_arguments(send)
        send.add_argument('--url', type=str, default=None, help="Webhook URL; overrides the configured provider.")
        send.add_argument('--provider', type=WebhookProvider, choices=list(WebhookProvider), default=None,
                          help="Webhook provider.")

        subparsers.add_parser('token', help="Create a new webhook.site capture URL.")

        inspect = subparsers.add_parser('inspect', help="Show requests captured by webhook.site.")
        inspect.add_argument('--token', type=str, default=None, help="webhook.site token (uuid).")
        inspect.add_argument('--latest', action='store_true', help="Only show the most recent request.")
        return parser

    @staticmethod
    def _add_generation_arguments(parser):
        parser.add_argument('-n', '--count', type=int, default=None, help="Number of people to generate.")
        parser.add_argument('--seed', type=int, default=None, help="Seed for reproducible output.")
        parser.add_argument('--locale', type=str, default=None, help="Faker locale, e.g. en_US.")

    def load_config(self, args) -> FakehookConfig:
        try:
            config = FakehookConfig(env_files=args.env_files or [])
            config.validate_env_vars()
        except (FileNotFoundError, ValueError) as e:
            self.parser.error(str(e))
        return config

    def generate(self, args, config: FakehookConfig):
        count = args.count if args.count is not None else config.count
        if count < 0:
            self.parser.error(f'count must not be negative, got {count}')
        seed = args.seed if args.seed is not None else config.seed
        locale = args.locale or config.locale
        logger.debug("Generating %s people (locale=%s, seed=%s)", count, locale, seed)
        try:
            return generate_people(count, locale=locale, seed=seed)
        except ValueError as e:
            self.parser.error(str(e))

    def get_service(self, config: FakehookConfig, url=None, provider=None, **overrides):
        settings = config.webhook_settings()
        if url:
            settings.update(WEBHOOK_PROVIDER=WebhookProvider.http, WEBHOOK_URL=url)
        elif provider:
            settings['WEBHOOK_PROVIDER'] = provider
        settings.update(overrides)
        return webhook_service_factory.get(**settings)

    def _get_webhook_site(self, config: FakehookConfig, **overrides) -> WebhookSiteService:
        return self.get_service(config, provider=WebhookProvider.webhook_site, **overrides)

    def run_generate(self, args, config):
        people = self.generate(args, config)
        print(json.dumps([person.as_dict() for person in people], indent=args.indent))
        return 0

    def run_send(self, args, config):
        people = self.generate(args, config)
        service = self.get_service(config, url=args.url, provider=args.provider)
        if isinstance(service, WebhookSiteService) and not service.token:
            service.create_token()
            print(f"Created capture URL: {service.url}")
        response = service.send_models(people)
        logger.info("Sent %s people, HTTP %s", len(people), response.status_code)
        print(f"Sent {len(people)} people to {response.url} (HTTP {response.status_code})")
        return 0

    def run_token(self, args, config):
        service = self._get_webhook_site(config)
        service.create_token()
        print(service.url)
        return 0

    def run_inspect(self, args, config):
        overrides = {'WEBHOOK_SITE_TOKEN': args.token} if args.token else {}
        service = self._get_webhook_site(config, **overrides)
        if not service.token:
            self.parser.error('No webhook.site token. Pass --token or set WEBHOOK_SITE_TOKEN.')
        captured = service.get_latest_request() if args.latest else service.get_requests()
        print(json.dumps(captured, indent=2))
        return 0

    def run(self, argv=None) -> int:
        args = self.parser.parse_args(argv)
        logging.basicConfig(format=LOG_FORMAT)
        logging.getLogger('fakehook').setLevel(logging.DEBUG if args.verbose else logging.INFO)

        commands = {
            'generate': self.run_generate,
            'send': self.run_send,
            'token': self.run_token,
            'inspect': self.run_inspect,
        }
        command = commands.get(args.command)
        if command is None:
            self.parser.print_help()
            return 1

        config = self.load_config(args)
        try:
            return command(args, config)
        except WebhookError as e:
            print(f"Webhook request failed: {e}", file=sys.stderr)
            return 1
        except ValidationError as e:
            logger.error("Invalid webhook settings: %s", e)
            return 2


def main(argv=None):
    sys.exit(Cli().run(argv))


if __name__ == '__main__':
    main()
