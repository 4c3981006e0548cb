"""Generate a self-contained HTML report embedding the encoded stats payload.

The payload is assigned to ``window.WebpackData`` as a single-quoted
string literal in the codec's comma-separated byte format.  The page
inflates it in the browser with the native ``DecompressionStream``
(``deflate-raw``), so it opens from any local file:// path without a
CDN.
"""

import html
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

from ..analysis.aggregator import load
from ..codec import encode
from ..config import DEFAULT_CONFIG, ReportConfig
from ..exceptions import ConfigurationError, OutputFileError
from ..formatting import format_size
from ..stats.normalizer import normalize_stats

logger = logging.getLogger(__name__)

PAYLOAD_GLOBAL = "WebpackData"


def generate_report(
    stats: Mapping[str, Any],
    output_path: Optional[Union[str, Path]] = None,
    config: Optional[ReportConfig] = None,
) -> str:
    """Normalize *stats*, encode the payload and write the HTML report.

    Parameters
    ----------
    stats:
        The bundler's full stats object.
    output_path:
        Where to write the HTML file.  Defaults to ``config.filename``
        inside the stats' ``outputPath``.
    config:
        Report settings; defaults to ``DEFAULT_CONFIG``.

    Returns
    -------
    str
        Absolute path to the generated HTML file.

    Raises
    ------
    ReferentialIntegrityError
        If the stats reference chunks or modules they do not contain;
        the report is not written.
    ConfigurationError
        If no output location can be determined.
    OutputFileError
        If the report file cannot be written.
    """
    config = config or DEFAULT_CONFIG

    payload = normalize_stats(stats, config.script_extensions)

    # Fails before anything is written if the viewer could not load it
    data = load(payload, config)

    encoded = encode(payload, level=config.compression_level)

    if output_path is None:
        if not payload.get("outputPath"):
            raise ConfigurationError(
                "Stats have no outputPath; pass an explicit report location"
            )
        output_path = Path(payload["outputPath"]) / config.filename

    out = Path(output_path).resolve()
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(render_html(encoded, config.title, config.script_extensions), encoding="utf-8")
    except OSError as e:
        raise OutputFileError(out, e.strerror or str(e)) from e

    logger.info(
        "Report written to %s (%d script assets, %s of modules, payload %d chars)",
        out,
        len(data.assets),
        format_size(data.total_stat_size),
        len(encoded),
    )
    return str(out)


def render_html(
    encoded: str,
    title: str = DEFAULT_CONFIG.title,
    script_extensions: Iterable[str] = DEFAULT_CONFIG.script_extensions,
) -> str:
    """Build the report page around an encoded payload.

    The page lists script assets only, largest emitted size first.
    """
    extensions = json.dumps(list(script_extensions)).replace("<", "\\u003c")
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{html.escape(title)}</title>
<style>
body {{ font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif; margin: 0; padding: 24px 32px; }}
h1 {{ font-size: 22px; margin-bottom: 16px; }}
table {{ border-collapse: collapse; font-size: 14px; }}
td, th {{ padding: 4px 12px; text-align: left; border-bottom: 1px solid #ddd; }}
td.size {{ text-align: right; font-variant-numeric: tabular-nums; }}
.entry {{ color: #389e0d; }}
</style>
</head>
<body>
<h1>{html.escape(title)}</h1>
<div id="app"></div>
<script>window.{PAYLOAD_GLOBAL} = '{encoded}'</script>
<script>
// Inflate the embedded payload: comma-separated bytes -> raw deflate -> JSON.
async function inflatePayload(str) {{
  var bytes = new Uint8Array(str.split(",").map(Number));
  var stream = new Blob([bytes]).stream().pipeThrough(new DecompressionStream("deflate-raw"));
  return JSON.parse(await new Response(stream).text());
}}

function fileSize(n) {{
  var units = ["B", "KB", "MB", "GB", "TB"];
  var i = 0;
  n = n || 0;
  while (n >= 1024 && i < units.length - 1) {{ n /= 1024; i++; }}
  return (Math.round(n * 100) / 100) + " " + units[i];
}}

var scriptExtensions = {extensions};

function isScript(name) {{
  return scriptExtensions.some(function(ext) {{ return name.slice(-ext.length) === ext; }});
}}

inflatePayload(window.{PAYLOAD_GLOBAL}).then(function(data) {{
  var entries = Object.values(data.assetsByChunkName || {{}});
  var rows = (data.assets || [])
    .filter(function(a) {{ return isScript(a.name || ""); }})
    .sort(function(a, b) {{ return b.size - a.size; }});
  var table = document.createElement("table");
  table.innerHTML = "<tr><th>Asset</th><th>Emitted size</th></tr>";
  rows.forEach(function(asset) {{
    var tr = document.createElement("tr");
    var name = document.createElement("td");
    name.textContent = asset.name;
    if (entries.indexOf(asset.name) !== -1) name.className = "entry";
    var size = document.createElement("td");
    size.className = "size";
    size.textContent = fileSize(asset.size);
    tr.appendChild(name);
    tr.appendChild(size);
    table.appendChild(tr);
  }});
  document.getElementById("app").appendChild(table);
}}).catch(function(err) {{
  document.getElementById("app").textContent = "Cannot decode embedded stats: " + err;
}});
</script>
</body>
</html>
"""
