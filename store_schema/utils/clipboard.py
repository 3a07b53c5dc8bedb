"""
Browser-side clipboard copy for the generator page.

The copy runs inside a Streamlit component iframe, so its outcome is only
known to the browser; the script reports success or failure in the
component itself.
"""
import json

COPY_SUCCESS = "Copied to clipboard!"
COPY_FAILURE = "Failed to copy: "

_SCRIPT = """<div id="copy-status" style="font-family: sans-serif; font-size: 0.9rem;"></div>
<script>
const text = %(text)s;
const status = document.getElementById("copy-status");

function showCopyResult(ok, message) {
  status.style.color = ok ? "#15803d" : "#b91c1c";
  status.textContent = message;
}

function fallbackCopyToClipboard(text) {
  const textarea = document.createElement("textarea");
  textarea.value = text;
  textarea.style.position = "fixed";
  textarea.style.opacity = "0";
  document.body.appendChild(textarea);
  textarea.focus();
  textarea.select();
  try {
    if (!document.execCommand("copy")) {
      throw new Error("copy command was rejected");
    }
    showCopyResult(true, %(success)s);
  } catch (err) {
    showCopyResult(false, %(failure)s + err.message);
  } finally {
    document.body.removeChild(textarea);
  }
}

if (navigator.clipboard && navigator.clipboard.writeText) {
  navigator.clipboard.writeText(text).then(() => {
    showCopyResult(true, %(success)s);
  }).catch(() => {
    fallbackCopyToClipboard(text);
  });
} else {
  fallbackCopyToClipboard(text);
}
</script>"""


def js_string(text: str) -> str:
    """
    JSON-encode `text` as a JS string literal safe inside an inline <script>.
    Every "<" is escaped so "</script>" or "<!--" in the text cannot end the tag.
    """
    return json.dumps(text).replace("<", "\\u003c")


def clipboard_script(text: str) -> str:
    """HTML for a component that copies `text` and shows the outcome."""
    return _SCRIPT % {
        "text": js_string(text),
        "success": js_string(COPY_SUCCESS),
        "failure": js_string(COPY_FAILURE),
    }
