from modelgen.languages.go.tags import (
    TAG_KEY_GORM,
    TAG_KEY_JSON,
    GormTag,
    Tag,
    sorted_tag_keys,
)


def test_empty_tags_render_empty():
    assert Tag().build() == ""
    assert GormTag().build() == ""


def test_tag_orders_gorm_before_json_then_alphabetical():
    tag = Tag({"yaml": "id", TAG_KEY_JSON: "id", "form": "id"})
    tag.set(TAG_KEY_GORM, "column:id")
    assert tag.build() == 'gorm:"column:id" json:"id" form:"id" yaml:"id"'


def test_tag_skips_empty_values():
    tag = Tag({TAG_KEY_JSON: "", "xml": "id"})
    assert tag.build() == 'xml:"id"'


def test_tag_remove():
    tag = Tag({TAG_KEY_JSON: "id"}).remove(TAG_KEY_JSON).remove("missing")
    assert tag.build() == ""


def test_gorm_tag_priorities():
    tag = GormTag()
    tag.set("comment", "user id")
    tag.set("primaryKey", "")
    tag.set("type", "bigint")
    tag.set("column", "id")
    tag.set("autoIncrement", "true")
    assert tag.build() == "column:id;type:bigint;primaryKey;autoIncrement:true;comment:user id"


def test_gorm_tag_multiple_values():
    tag = GormTag().append("index", "idx_a,priority:1").append("index", "idx_b,priority:2")
    assert tag.build() == "index:idx_a,priority:1;index:idx_b,priority:2"


def test_gorm_tag_set_replaces_values():
    tag = GormTag().append("index", "a", "b").set("index", "c")
    assert tag.build() == "index:c"


def test_gorm_tag_bare_key_without_values():
    tag = GormTag({"not null": []})
    assert tag.build() == "not null"


def test_unknown_keys_sort_last_by_name():
    assert sorted_tag_keys(["zeta", "comment", "alpha", "column"]) == [
        "column",
        "alpha",
        "comment",
        "zeta",
    ]
