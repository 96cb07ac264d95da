import pytest

from src.exceptions.lookup import APIRequestError, InvalidResponseError
from src.services.places_service import PlacesService, build_overpass_query


def node(node_id, name=None, **tags):
    element = {"type": "node", "id": node_id, "lat": 48.85, "lon": 2.29}
    if name is not None:
        tags["name"] = name
    if tags:
        element["tags"] = tags
    return element


class TestBuildOverpassQuery:
    """Test cases for the Overpass QL query builder."""

    def test_query_selects_tagged_nodes_around_point(self, paris_coordinates):
        """Test the query covers the three POI tags within 10km and caps output at 5."""
        query = build_overpass_query(paris_coordinates)

        around = f"(around:10000,{paris_coordinates.latitude},{paris_coordinates.longitude})"
        assert "[out:json];" in query
        assert f'node["tourism"="attraction"]["name"]{around};' in query
        assert f'node["historic"]["name"]{around};' in query
        assert f'node["leisure"="park"]["name"]{around};' in query
        assert "out body 5;" in query


class TestPlacesService:
    """Test cases for the PlacesService class."""

    def setup_method(self):
        PlacesService.reset_instance()
        self.service = PlacesService()

    @pytest.mark.asyncio
    async def test_get_places_posts_query_body(self, mock_http_client, make_response, paris_coordinates):
        """Test the Overpass query is sent as a raw POST body."""
        mock_http_client.post.return_value = make_response({"elements": []})

        await self.service.get_places(paris_coordinates)

        mock_http_client.post.assert_called_once()
        mock_http_client.get.assert_not_called()
        call_args = mock_http_client.post.call_args
        assert call_args[0][0] == self.service.base_url
        assert call_args[1]["content"] == build_overpass_query(paris_coordinates)

    @pytest.mark.asyncio
    async def test_get_places_keeps_server_order(self, mock_http_client, make_response, paris_coordinates):
        """Test names come back in the order the server returned them."""
        mock_http_client.post.return_value = make_response(
            {
                "elements": [
                    node(1, "Tour Eiffel", tourism="attraction"),
                    node(2, "Arc de Triomphe", historic="monument"),
                    node(3, "Parc Monceau", leisure="park"),
                ]
            }
        )

        result = await self.service.get_places(paris_coordinates)

        assert result == ["Tour Eiffel", "Arc de Triomphe", "Parc Monceau"]

    @pytest.mark.asyncio
    async def test_get_places_skips_unnamed_elements(self, mock_http_client, make_response, paris_coordinates):
        """Test elements without tags, a name tag or with an empty name are dropped."""
        mock_http_client.post.return_value = make_response(
            {
                "elements": [
                    node(1),
                    node(2, historic="memorial"),
                    node(3, "", leisure="park"),
                    node(4, "Louvre", tourism="attraction"),
                ]
            }
        )

        result = await self.service.get_places(paris_coordinates)

        assert result == ["Louvre"]

    @pytest.mark.asyncio
    async def test_get_places_all_unnamed_gives_empty_list(
        self, mock_http_client, make_response, paris_coordinates
    ):
        """Test a response where nothing has a name yields an empty list, not an error."""
        mock_http_client.post.return_value = make_response(
            {"elements": [node(1, historic="ruins"), node(2, leisure="park")]}
        )

        result = await self.service.get_places(paris_coordinates)

        assert result == []

    @pytest.mark.asyncio
    async def test_get_places_truncates_to_five(self, mock_http_client, make_response, paris_coordinates):
        """Test at most five names are returned."""
        mock_http_client.post.return_value = make_response(
            {"elements": [node(i, f"Place {i}", historic="yes") for i in range(8)]}
        )

        result = await self.service.get_places(paris_coordinates)

        assert result == [f"Place {i}" for i in range(5)]

    @pytest.mark.asyncio
    async def test_get_places_keeps_duplicates(self, mock_http_client, make_response, paris_coordinates):
        """Test duplicate names are not collapsed."""
        mock_http_client.post.return_value = make_response(
            {"elements": [node(1, "Fontaine", historic="yes"), node(2, "Fontaine", historic="yes")]}
        )

        result = await self.service.get_places(paris_coordinates)

        assert result == ["Fontaine", "Fontaine"]

    @pytest.mark.asyncio
    async def test_get_places_missing_elements(self, mock_http_client, make_response, paris_coordinates):
        """Test a response without an elements array is rejected."""
        mock_http_client.post.return_value = make_response({"remark": "runtime error"})

        with pytest.raises(InvalidResponseError, match="Invalid places data received"):
            await self.service.get_places(paris_coordinates)

    @pytest.mark.asyncio
    async def test_get_places_gateway_timeout(self, mock_http_client, make_response, paris_coordinates):
        """Test an overloaded interpreter raises an API request error."""
        mock_http_client.post.return_value = make_response(status_code=504, text="Gateway Timeout")

        with pytest.raises(APIRequestError, match="status 504"):
            await self.service.get_places(paris_coordinates)
