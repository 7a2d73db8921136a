from django.core.management.base import BaseCommand

from footprint.services.ai_client import GenerativeModelClient


class Command(BaseCommand):
    help = 'Test access to the configured generative model'

    def add_arguments(self, parser):
        parser.add_argument('--prompt', default='Say hello in five words or fewer.')

    def handle(self, *args, **options):
        client = GenerativeModelClient()
        self.stdout.write(f"Provider: {'Azure OpenAI' if client.uses_azure else 'OpenAI-compatible'}")
        self.stdout.write(f"Model: {client.model}")
        self.stdout.write(f"Credentials: {'SET' if client.is_configured else 'NOT SET'}")

        try:
            text = client.generate_text(
                system="You are a connectivity check.",
                messages=[{"role": "user", "content": options['prompt']}],
                temperature=0,
                max_tokens=20,
            )
            self.stdout.write(self.style.SUCCESS(f"Reply: {text}"))
        except Exception as e:
            self.stderr.write(self.style.ERROR(f"Error calling the model: {e}"))
