from modelgen.core.config import GeneratorConfig
from modelgen.languages.go.column import Column, Index, columns_to_fields


def by_name(fields):
    return {f.column_name: f for f in fields}


def test_default_config_fields(user_columns, config, type_map):
    fields = by_name(columns_to_fields(user_columns, config, type_map))

    assert fields["id"].name == "ID"
    assert fields["id"].type == "int64"
    assert fields["id"].tags() == (
        'gorm:"column:id;type:bigint unsigned;primaryKey;autoIncrement:true" json:"id"'
    )

    assert fields["name"].type == "string"
    assert fields["name"].tags() == (
        'gorm:"column:name;type:varchar(64);not null;index:idx_name,priority:1;'
        'comment:display name" json:"name"'
    )
    assert fields["name"].column_comment == "display name"

    assert fields["email"].tags() == (
        'gorm:"column:email;type:varchar(255);uniqueIndex:uk_email,priority:1" json:"email"'
    )

    assert fields["is_admin"].name == "IsAdmin"
    assert fields["is_admin"].type == "bool"
    assert fields["is_admin"].tags() == 'gorm:"column:is_admin;type:tinyint(1);not null" json:"is_admin"'

    assert fields["created_at"].type == "time.Time"
    assert fields["deleted_at"].type == "gorm.DeletedAt"


def test_field_nullable_uses_pointers(user_columns, type_map):
    config = GeneratorConfig(field_nullable=True)
    fields = by_name(columns_to_fields(user_columns, config, type_map))

    assert fields["email"].type == "*string"
    assert fields["created_at"].type == "*time.Time"
    assert fields["name"].type == "string"
    # soft delete column keeps its dedicated type
    assert fields["deleted_at"].type == "gorm.DeletedAt"


def test_field_signable(user_columns, type_map):
    config = GeneratorConfig(field_signable=True)
    fields = by_name(columns_to_fields(user_columns, config, type_map))

    assert fields["id"].type == "uint64"
    assert fields["id"].gen_type() == "Uint64"
    assert fields["name"].type == "string"


def test_field_coverable_points_columns_with_defaults(type_map):
    column = Column(name="status", data_type="varchar", column_type="varchar(16)", default="active")
    f = column.to_field(GeneratorConfig(field_coverable=True), type_map)

    assert f.type == "*string"
    assert "default:active" in f.tags()


def test_zero_defaults_are_not_tagged(type_map, config):
    assert "default" not in Column(
        name="count", data_type="int", column_type="int(11)", default="0"
    ).to_field(config, type_map).tags()
    assert "default" not in Column(
        name="ratio", data_type="decimal", column_type="decimal(10,2)", default="0"
    ).to_field(config, type_map).tags()
    assert "default" not in Column(
        name="at", data_type="datetime", column_type="datetime", default="0000-00-00 00:00:00"
    ).to_field(config, type_map).tags()
    assert "default" not in Column(
        name="data", data_type="blob", column_type="blob", default="NULL"
    ).to_field(config, type_map).tags()


def test_non_zero_defaults_are_tagged(type_map, config):
    f = Column(name="count", data_type="int", column_type="int(11)", default="5").to_field(config, type_map)
    assert "default:5" in f.tags()

    f = Column(name="title", data_type="varchar", column_type="varchar(8)", default=" ").to_field(config, type_map)
    assert "default:' '" in f.tags()


def test_default_tag_can_be_disabled(type_map):
    config = GeneratorConfig(field_with_default_tag=False)
    f = Column(name="count", data_type="int", column_type="int(11)", default="5").to_field(config, type_map)
    assert "default" not in f.tags()


def test_multiline_comment(type_map, config):
    f = Column(
        name="note", data_type="text", column_type="text", comment="first\nsecond"
    ).to_field(config, type_map)

    assert f.multiline_comment
    assert "comment:first\\nsecond" in f.tags()


def test_primary_key_index_is_skipped(type_map, config):
    column = Column(
        name="id",
        data_type="int",
        column_type="int",
        primary_key=True,
        indexes=[Index(name="PRIMARY", primary_key=True, unique=True), Index(name="idx_id", priority=2)],
    )
    tags = column.to_field(config, type_map).tags()
    assert "PRIMARY" not in tags
    assert "index:idx_id,priority:2" in tags
    assert "autoIncrement" not in tags


def test_json_tag_case(user_columns, type_map):
    config = GeneratorConfig(json_tag_case="camel")
    fields = by_name(columns_to_fields(user_columns, config, type_map))
    assert fields["is_admin"].tag["json"] == "isAdmin"
    assert fields["id"].tag["json"] == "id"


def test_unknown_column_type_falls_back(type_map, config):
    f = Column(name="geom", data_type="geometry", column_type="geometry").to_field(config, type_map)
    assert f.type == "string"
    assert f.gen_type() == "String"


def test_custom_mapping_applies(type_map, config):
    type_map.set("jsonb", "datatypes.JSON")
    f = Column(name="payload", data_type="jsonb").to_field(config, type_map)
    assert f.type == "datatypes.JSON"
    assert f.gen_type() == "Field"
    assert 'type:jsonb' in f.tags()


def test_to_field_defaults():
    f = Column(name="user_id", data_type="bigint").to_field()
    assert f.name == "UserID"
    assert f.type == "int64"
