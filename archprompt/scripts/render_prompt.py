from __future__ import annotations

import argparse
import sys
from pathlib import Path

from archprompt.architecture import ARCHITECTURE_VARIABLES, load_architecture_prompt
from archprompt.config import settings
from archprompt.core.errors import MissingParameterError, PromptNotFoundError, TemplateSyntaxError
from archprompt.observability.tracing import Span, end_span_event, new_trace_id


def _option(name: str) -> str:
    return '--' + name.replace('_', '-')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='archprompt-render',
        description='Render the cloud architecture modernization prompt.',
    )
    parser.add_argument('--actual-state', help='Current state of the application')
    parser.add_argument('--industry', help='Industry context')
    parser.add_argument('--environment', help='Target environment')
    parser.add_argument('--cloud', help='Target cloud provider')
    parser.add_argument('--version', default=None, help='Prompt version (default: ARCHPROMPT_PROMPT_VERSION)')
    parser.add_argument('--output', type=Path, default=None, help='Write the prompt to this file instead of stdout')
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Unset options are left out so the renderer reports them.
    parameters = {
        name: getattr(args, name)
        for name in ARCHITECTURE_VARIABLES
        if getattr(args, name) is not None
    }
    version = args.version or settings.prompt_version

    span = Span(name='render_prompt', trace_id=new_trace_id(), attributes={'version': version})
    try:
        rendered = load_architecture_prompt(version).render(parameters)
    except MissingParameterError as exc:
        end_span_event(
            'prompt.render_failed', span, enabled=settings.trace_events, stream=sys.stderr, missing=list(exc.missing)
        )
        parser.error('missing required option(s): ' + ', '.join(_option(name) for name in exc.missing))
    except PromptNotFoundError as exc:
        end_span_event('prompt.render_failed', span, enabled=settings.trace_events, stream=sys.stderr, error=str(exc))
        parser.error(str(exc))
    except TemplateSyntaxError as exc:
        end_span_event('prompt.render_failed', span, enabled=settings.trace_events, stream=sys.stderr, error=str(exc))
        parser.error(f'malformed prompt template: {exc}')
    end_span_event('prompt.rendered', span, enabled=settings.trace_events, stream=sys.stderr, prompt_chars=len(rendered))

    if args.output is not None:
        args.output.write_text(rendered, encoding='utf-8')
    else:
        sys.stdout.write(rendered)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == '__main__':
    run()
