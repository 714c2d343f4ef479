APP_ORG = "QuickTools"
APP_NAME = "Text Editor Software Patterns"

CREDIT_TEXT = "Project of Software Patterns - Made by ONCINO Alexandre"
HINT_TEXT = " NOTE : Use CTRL+C and CTRL+V to copy and paste text"
STATS_READY = "Statistics : Ready"
STATS_TEMPLATE = "  LIVE STATISTICS : {words} words | {chars} characters  "

# Midnight blue, used for the status bar and the save button
THEME_COLOR = "#2c3e50"

# Written once at the top of every RTF export; the closing brace is appended after the body.
RTF_HEADER = (
    r"{\rtf1\ansi\ansicpg1252\deff0\nouicompat\deflang1036"
    r"{\fonttbl{\f0\fnil\fcharset0 Arial;}}"
    r"\viewkind4\uc1\pard\sa200\sl276\slmult1\f0\fs24\lang12 "
)
RTF_FOOTER = "}"
RTF_PARAGRAPH = r"\par "

HTML_TEMPLATE = (
    "<!DOCTYPE html><html><head><meta charset='UTF-8'><title>{title}</title></head>"
    "<body style='font-family: sans-serif; padding: 40px; background: #f4f4f4;'>"
    "<div style='background: white; padding: 30px; border-radius: 10px; "
    "box-shadow: 0 4px 10px rgba(0,0,0,0.1);'>"
    "<h1 style='color: #2c3e50; border-bottom: 2px solid #eee; padding-bottom: 10px;'>"
    "{title}</h1>"
    "<p style='font-size: 16px; line-height: 1.6; color: #333; white-space: pre-wrap;'>"
    "{body}</p>"
    "</div></body></html>"
)
