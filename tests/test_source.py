from reqline.parser.source import load_statements


class TestLoadStatements:
    def test_plain_text_one_per_line(self, tmp_path):
        f = tmp_path / "statements.txt"
        f.write_text(
            "HTTP GET | URL http://a.test\n\n"
            'HTTP POST | URL http://b.test | BODY {"a": 1}\n',
            encoding="utf-8",
        )
        assert load_statements(f) == [
            "HTTP GET | URL http://a.test",
            'HTTP POST | URL http://b.test | BODY {"a": 1}',
        ]

    def test_yaml_list_of_statements(self, tmp_path):
        f = tmp_path / "statements.yaml"
        f.write_text(
            "- 'HTTP GET | URL http://a.test'\n"
            "- 'HTTP GET | URL http://b.test'\n",
            encoding="utf-8",
        )
        assert load_statements(f) == ["HTTP GET | URL http://a.test", "HTTP GET | URL http://b.test"]

    def test_json_payload_list(self, tmp_path):
        f = tmp_path / "payloads.json"
        f.write_text('[{"reqline": "HTTP GET | URL http://a.test"}]', encoding="utf-8")
        assert load_statements(f) == ["HTTP GET | URL http://a.test"]

    def test_single_payload(self, tmp_path):
        f = tmp_path / "payload.json"
        f.write_text('{"reqline": "HTTP GET | URL http://a.test"}', encoding="utf-8")
        assert load_statements(f) == ["HTTP GET | URL http://a.test"]
