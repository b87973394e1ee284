import io
import csv
import json

from ..config import logger
from ..errors import SerializationError

CSV_HEADER = ['Subdomain', 'Ip']


def to_pairs(state):
    """Flattens hosts into [(subdomain, ip), ...]."""
    return [(host.name, address) for host in state.host_list() for address in host.addresses]


def render_text(state, sep=" "):
    return "\n".join(sep.join(pair) for pair in to_pairs(state))


def render_csv(state):
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerow(CSV_HEADER)
    writer.writerows(to_pairs(state))
    return buffer.getvalue().rstrip('\n')


def render_json(state):
    try:
        return json.dumps(state.to_dict(), separators=(',', ':'))
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Could not serialize scan of {state.domain} to JSON: {e}") from e


RENDERERS = {
    'txt': render_text,
    'json': render_json,
    'csv': render_csv,
}


def render(state, fmt='txt'):
    renderer = RENDERERS.get(fmt)
    if renderer is None:
        logger.warning(f"Unknown output format '{fmt}', falling back to txt.")
        renderer = render_text
    return renderer(state)


def write_output(text, path):
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)
        if text and not text.endswith('\n'):
            f.write('\n')
    logger.info(f"Results saved to: {path}")
