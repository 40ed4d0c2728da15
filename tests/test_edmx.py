# ==============================================
# Tests for the EDMX reader / writer
# ==============================================

import io

import pytest

from modelstore.errors import ModelDeserializationError
from modelstore.metadata import compile_model
from modelstore.serialization import read_descriptor, read_edmx, to_edmx_bytes, write_edmx


class TestWriter:

    def test_optional_attributes_omitted(self, blog_descriptor):
        text = to_edmx_bytes(blog_descriptor).decode("utf-8")

        assert 'Schema="' not in text
        assert '<EntityType Name="Blog" Table="Blogs">' in text
        assert '<EntityType Name="Post">' in text
        assert 'MaxLength="200"' in text

    def test_explicit_schemas_written(self, shop_descriptor):
        text = to_edmx_bytes(shop_descriptor).decode("utf-8")

        assert '<Model Namespace="Shop" Schema="sales">' in text
        assert '<EntityType Name="Order" Schema="orders">' in text

    def test_write_to_stream(self, blog_descriptor):
        buffer = io.BytesIO()
        write_edmx(blog_descriptor, buffer)
        assert buffer.getvalue() == to_edmx_bytes(blog_descriptor)

    def test_none_descriptor_rejected(self):
        with pytest.raises(ValueError):
            write_edmx(None, io.BytesIO())


class TestReader:

    def test_descriptor_round_trip(self, blog_descriptor):
        parsed = read_descriptor(io.BytesIO(to_edmx_bytes(blog_descriptor)))
        assert parsed == blog_descriptor

    def test_default_schema_fallback(self, blog_descriptor):
        data = to_edmx_bytes(blog_descriptor)

        assert read_edmx(io.BytesIO(data), "dbo").default_schema == "dbo"
        assert read_edmx(io.BytesIO(data), "other").default_schema == "other"

    def test_read_from_path(self, tmp_path, shop_descriptor):
        path = tmp_path / "Shop.edmx"
        path.write_bytes(to_edmx_bytes(shop_descriptor))

        assert read_edmx(str(path), "dbo") == compile_model(shop_descriptor, "dbo")

    def test_hand_written_document(self):
        document = b"""<?xml version='1.0' encoding='utf-8'?>
<Edmx Version="1.0">
  <Model Namespace="Library">
    <EntityType Name="Book">
      <Key><PropertyRef Name="Isbn" /></Key>
      <Property Name="Isbn" Type="String" Nullable="false" MaxLength="13" />
    </EntityType>
  </Model>
</Edmx>
"""
        model = read_edmx(io.BytesIO(document), "dbo")

        book = model.entity("Book")
        assert book.schema == "dbo"
        assert book.get_property("Isbn").nullable is False
        assert book.get_property("Isbn").max_length == 13

    @pytest.mark.parametrize("document, message", [
        (b"<Edmx", "Malformed"),
        (b"<Model />", "root element"),
        (b"<Edmx />", "Missing <Model>"),
        (b"<Edmx><Model /></Edmx>", "Namespace"),
        (b'<Edmx><Model Namespace="X"><EntityType /></Model></Edmx>', "Name"),
        (b'<Edmx><Model Namespace="X"><EntityType Name="A"><Key><PropertyRef Name="Id" /></Key>'
         b'<Property Name="Id" Type="Int32" Nullable="maybe" /></EntityType></Model></Edmx>', "boolean"),
        (b'<Edmx><Model Namespace="X"><EntityType Name="A"><Key><PropertyRef Name="Id" /></Key>'
         b'<Property Name="Id" Type="Int32" MaxLength="ten" /></EntityType></Model></Edmx>', "integer"),
        (b'<Edmx><Model Namespace="X"><EntityType Name="A">'
         b'<Property Name="Id" Type="Int32" /></EntityType></Model></Edmx>', "Invalid model"),
    ])
    def test_invalid_documents(self, document, message):
        with pytest.raises(ModelDeserializationError, match=message):
            read_edmx(io.BytesIO(document), "dbo")
