from line_decorator import Document, LineMetadata, TerminalRenderer, colors

doc = Document()

# A two-line listing with one error and one note
first = doc.add_line("def area(w, h):", LineMetadata("shapes.py", 12))
second = doc.add_line("    return w * hieght", LineMetadata("shapes.py", 13))

# Highlight the misspelled name in the source line
doc.color_line(second, (15, 21, colors.FG_RED))

# Comments below point up at the line; the first one added is revealed first
doc.add_below(second, 15, "undefined name 'hieght'")
doc.color_below(second, 0, (0, 9, colors.BOLD + colors.FG_RED))
doc.add_below(second, 11, "did you mean 'h'?")

# Comments above point down at the line
doc.add_above(first, 12, "parameter defined here")
doc.color_above(first, 0, (0, 9, colors.FG_CYAN))

renderer = TerminalRenderer()
print(renderer.visualize(doc))

# Same listing without escape codes, e.g. for log files
print(renderer.visualize(doc, output_format=TerminalRenderer.PLAIN))

