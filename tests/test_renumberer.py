from proto_renumber.rewriter.renumberer import renumber_body, renumber_body_counted


class TestRenumberBody:
    def test_single_line_body(self):
        assert renumber_body(" string name = 5; int32 id = 2; ") == " string name = 1; int32 id = 2; "

    def test_labels(self):
        body = "\n  repeated string tags = 7;\n  optional int32 a = 3;\n  required bool b = 9;\n"
        expected = "\n  repeated string tags = 1;\n  optional int32 a = 2;\n  required bool b = 3;\n"
        assert renumber_body(body) == expected

    def test_map_type_preserved(self):
        body = "\n  map<string, int32> tags = 4;\n  map<string,Other> others = 8;\n"
        expected = "\n  map<string, int32> tags = 1;\n  map<string,Other> others = 2;\n"
        assert renumber_body(body) == expected

    def test_dotted_types(self):
        body = "\n  .pkg.Other other = 3;\n  google.protobuf.Timestamp ts = 8;\n"
        expected = "\n  .pkg.Other other = 1;\n  google.protobuf.Timestamp ts = 2;\n"
        assert renumber_body(body) == expected

    def test_options_preserved(self):
        body = '\n  int32 old = 5 [deprecated = true];\n  string s = 9 [json_name = "x"];\n'
        expected = '\n  int32 old = 1 [deprecated = true];\n  string s = 2 [json_name = "x"];\n'
        assert renumber_body(body) == expected

    def test_option_string_with_brackets_and_semicolons(self):
        body = '\n  string s = 4 [json_name = "a;b]"];\n  int32 t = 6;\n'
        expected = '\n  string s = 1 [json_name = "a;b]"];\n  int32 t = 2;\n'
        assert renumber_body(body) == expected

    def test_zero_tag_becomes_one(self):
        assert renumber_body("\n  int32 a = 0;\n") == "\n  int32 a = 1;\n"

    def test_oneof_members_share_counter(self):
        body = """
  string name = 3;
  oneof choice {
    int32 a = 7;
    string b = 8;
  }
  bool flag = 2;
"""
        expected = """
  string name = 1;
  oneof choice {
    int32 a = 2;
    string b = 3;
  }
  bool flag = 4;
"""
        assert renumber_body(body) == expected


class TestRenumberBodyLeavesAlone:
    def test_line_comment_field_untouched(self):
        body = "\n  // int32 z = 7;\n  int32 a = 4;\n"
        assert renumber_body(body) == "\n  // int32 z = 7;\n  int32 a = 1;\n"

    def test_trailing_comment_untouched(self):
        body = "\n  int32 a = 4; // was int32 a = 2;\n"
        assert renumber_body(body) == "\n  int32 a = 1; // was int32 a = 2;\n"

    def test_block_comment_field_untouched(self):
        body = "\n  /* int32 z = 7; */\n  int32 a = 4;\n"
        assert renumber_body(body) == "\n  /* int32 z = 7; */\n  int32 a = 1;\n"

    def test_field_after_inline_block_comment(self):
        body = "\n  /* note */ int32 a = 4;\n"
        assert renumber_body(body) == "\n  /* note */ int32 a = 1;\n"

    def test_nested_message_fields_untouched(self):
        body = "\n  message Inner {\n    int32 x = 9;\n  }\n  int32 y = 3;\n"
        expected = "\n  message Inner {\n    int32 x = 9;\n  }\n  int32 y = 1;\n"
        assert renumber_body(body) == expected

    def test_field_after_nested_message_on_same_line(self):
        body = " message Inner { int32 x = 9; } int32 y = 3; "
        assert renumber_body(body) == " message Inner { int32 x = 9; } int32 y = 1; "

    def test_enum_values_untouched(self):
        body = "\n  enum Kind {\n    UNKNOWN = 0;\n    OTHER = 5;\n  }\n  Kind kind = 4;\n"
        expected = "\n  enum Kind {\n    UNKNOWN = 0;\n    OTHER = 5;\n  }\n  Kind kind = 1;\n"
        assert renumber_body(body) == expected

    def test_option_and_reserved_untouched(self):
        body = "\n  option deprecated = true;\n  option foo = 5;\n  reserved 2, 3;\n  int32 a = 9;\n"
        expected = "\n  option deprecated = true;\n  option foo = 5;\n  reserved 2, 3;\n  int32 a = 1;\n"
        assert renumber_body(body) == expected

    def test_multiline_declaration_not_matched(self):
        body = "\n  int32\n    a = 5;\n"
        assert renumber_body(body) == body

    def test_malformed_tags_not_matched(self):
        body = "\n  int32 a = ;\n  int32 b = x;\n  int32 c = 5\n"
        assert renumber_body(body) == body

    def test_mid_line_text_not_a_declaration(self):
        body = "\n  foo int32 a = 5;\n"
        assert renumber_body(body) == body

    def test_empty_and_fieldless_bodies(self):
        assert renumber_body("") == ""
        assert renumber_body("\n  // nothing here\n") == "\n  // nothing here\n"


class TestRenumberBodyCounted:
    def test_counts_only_changed_tags(self):
        body = "\n  int32 a = 1;\n  int32 b = 5;\n  int32 c = 3;\n"
        assert renumber_body_counted(body) == ("\n  int32 a = 1;\n  int32 b = 2;\n  int32 c = 3;\n", 1)

    def test_already_sequential(self):
        body = "\n  int32 a = 1;\n  int32 b = 2;\n"
        assert renumber_body_counted(body) == (body, 0)

    def test_leading_zero_counts_as_change(self):
        assert renumber_body_counted(" int32 a = 01; ") == (" int32 a = 1; ", 1)
