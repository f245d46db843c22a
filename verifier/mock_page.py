"""
Mocked translator page.
Two fixed surfaces: output is "Translated: " + input, or empty when the
input is blank.
"""

INPUT_SELECTOR = "#input"
OUTPUT_SELECTOR = "#output"
OUTPUT_PREFIX = "Translated: "

MOCK_TRANSLATOR_HTML = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="UTF-8" />
    <title>Mock Translator</title>
  </head>
  <body>
    <h2>Mock Translator</h2>

    <textarea id="input" placeholder="Enter text"></textarea>
    <textarea id="output" placeholder="Translated text" readonly></textarea>

    <script>
      const input = document.getElementById('input');
      const output = document.getElementById('output');

      input.addEventListener('input', () => {
        if (input.value.trim() === '') {
          output.value = '';
        } else {
          output.value = 'Translated: ' + input.value;
        }
      });
    </script>
  </body>
</html>
"""


def expected_mock_output(text: str) -> str:
    """What the mocked page shows for a given input."""
    if not text.strip():
        return ""
    return OUTPUT_PREFIX + text
