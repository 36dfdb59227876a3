from api_doc_snippets.writer import DocumentationWriter


class TestDocumentationWriter:
    def test_code_block(self):
        writer = DocumentationWriter()
        with writer.code_block("http"):
            writer.println("GET / HTTP/1.1")
        assert writer.getvalue() == "\n[source,http]\n----\nGET / HTTP/1.1\n----\n\n"

    def test_shell_command_prefixes_prompt(self):
        writer = DocumentationWriter()
        with writer.shell_command():
            writer.println("curl http://localhost")
        assert writer.getvalue() == "\n[source,bash]\n----\n$ curl http://localhost\n----\n\n"

    def test_table(self):
        writer = DocumentationWriter()
        writer.table(["Relation", "Description"], [("self", "This item"), ("next", "Next item")])
        assert writer.getvalue() == (
            "|===\n"
            "|Relation|Description\n"
            "\n|self\n|This item\n"
            "\n|next\n|Next item\n"
            "\n|===\n"
        )

    def test_anchor_and_title(self):
        writer = DocumentationWriter()
        writer.anchor("response-fields-owner")
        writer.title("Owner")
        assert writer.getvalue() == "[[response-fields-owner]]\n.Owner\n"
