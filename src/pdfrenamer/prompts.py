"""
Prompts sent to the image and text models
"""

TRANSCRIBE_PAGE_V1 = """You convert an image of a page from a PDF document to markdown.
Please only provide markdown, no explanation or extraneous information about the work.
Please do your best to convert fields and tables. If you cannot, please just list the information.
Headers and footers repeated on the page should be kept once, as blockquotes.
Remove duplicated content and do not add commentary that is not on the page.
If you are unable to convert the image, please respond with 'N/A'."""

EXTRACT_FIELDS_V1 = """The following is markdown document that will be used to extract information from.
The user would like you to ensure the following about the extraction: {prompt}
The information extracted will be used to evaluate the format of the filename "{format}",
which is in Jinja2 template format (a leading dot on a field name, as in Go templates, is allowed). No extraneous explanation or content is required.
Please provide JSON output of the elements from the expected filename.
For example if the format was {{{{.Title | snakecase}}}}, please return JSON of {{"Title": "My Title"}}
Please keep it as string value key-pairs. Ensure the key names are the same case as the template."""


def build_extraction_prompt(prompt: str, filename_format: str) -> str:
    """Interpolate the user's guidance and filename format into the system prompt"""
    return EXTRACT_FIELDS_V1.format(prompt=prompt, format=filename_format)
