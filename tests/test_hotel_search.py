import unittest

from fake_api import FakeAmadeus, offer

from hotel_agent.tools import hotel_search
from hotel_agent.tools.hotel_search import HOTEL_OFFERS_PATH


def offers_payload(*offers, available=True):
    return {
        "data": [{
            "type": "hotel-offers",
            "hotel": {"type": "hotel", "hotelId": "MCLONGHM", "name": "JW Marriott Grosvenor House London",
                      "cityCode": "LON"},
            "available": available,
            "offers": list(offers),
            "self": "https://test.api.amadeus.com/v3/shopping/hotel-offers?hotelIds=MCLONGHM",
        }]
    }


class TestHotelSearch(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.api = FakeAmadeus()
        patcher = self.api.patch()
        patcher.start()
        self.addCleanup(patcher.stop)

    async def test_maps_each_offer_of_the_first_hotel(self):
        self.api.route("GET", HOTEL_OFFERS_PATH, offers_payload(
            offer("OFF1", total="100.00", currency="USD", text="Deluxe king"),
            offer("OFF2", total="250.50", currency="GBP"),
        ))

        result = await hotel_search({"hotelIds": "MCLONGHM"})

        self.assertTrue(result.ok)
        first, second = result.data
        self.assertEqual(first, {
            "hotelName": "JW Marriott Grosvenor House London",
            "available": True,
            "offerId": "OFF1",
            "checkInDate": "2025-11-01",
            "checkOutDate": "2025-11-03",
            "description": "Deluxe king",
            "price": "100.00USD",
            "policies": {"paymentType": "guarantee", "cancellation": {"deadline": "2025-10-30T23:59:00"}},
        })
        self.assertEqual(second["offerId"], "OFF2")
        self.assertEqual(second["price"], "250.50GBP")

    async def test_only_first_hotel_is_read(self):
        payload = offers_payload(offer("OFF1"))
        second_hotel = dict(payload["data"][0], hotel={"name": "Other"}, offers=[offer("OFF9")])
        payload["data"].append(second_hotel)
        self.api.route("GET", HOTEL_OFFERS_PATH, payload)

        result = await hotel_search({"hotelIds": "MCLONGHM,OTHER"})

        self.assertEqual([o["offerId"] for o in result.data], ["OFF1"])

    async def test_query_defaults(self):
        self.api.route("GET", HOTEL_OFFERS_PATH, offers_payload(offer("OFF1")))

        await hotel_search({"hotelIds": "MCLONGHM"})

        [request] = self.api.calls_to(HOTEL_OFFERS_PATH)
        self.assertEqual(request.headers["authorization"], "Bearer token-1")
        self.assertEqual(dict(request.url.params), {"hotelIds": "MCLONGHM", "adults": "1", "roomQuantity": "1"})

    async def test_optional_parameters_are_forwarded(self):
        self.api.route("GET", HOTEL_OFFERS_PATH, offers_payload(offer("OFF1")))

        await hotel_search({
            "hotelIds": "MCLONGHM", "adults": 2, "checkInDate": "2025-11-01",
            "checkOutDate": "2025-11-03", "priceRange": "100-300", "roomQuantity": 2,
        })

        params = dict(self.api.calls_to(HOTEL_OFFERS_PATH)[0].url.params)
        self.assertEqual(params, {
            "hotelIds": "MCLONGHM", "adults": "2", "checkInDate": "2025-11-01",
            "checkOutDate": "2025-11-03", "priceRange": "100-300", "roomQuantity": "2",
        })

    async def test_same_arguments_give_same_output(self):
        self.api.route("GET", HOTEL_OFFERS_PATH, offers_payload(offer("OFF1"), offer("OFF2")))
        first = await hotel_search({"hotelIds": "MCLONGHM"})
        second = await hotel_search({"hotelIds": "MCLONGHM"})
        self.assertEqual(first.data, second.data)

    async def test_no_hotel_data_is_a_mapping_failure(self):
        self.api.route("GET", HOTEL_OFFERS_PATH, {"data": []})

        result = await hotel_search({"hotelIds": "MCLONGHM"})

        self.assertFalse(result.ok)
        self.assertEqual(result.error.kind, "mapping")

    async def test_offer_without_price_is_a_mapping_failure(self):
        broken = offer("OFF1")
        del broken["price"]
        self.api.route("GET", HOTEL_OFFERS_PATH, offers_payload(offer("OFF0"), broken))

        result = await hotel_search({"hotelIds": "MCLONGHM"})

        self.assertFalse(result.ok)
        self.assertEqual(result.error.kind, "mapping")
        self.assertNotIn("data", result.to_dict())

    async def test_upstream_error_becomes_failure(self):
        errors = {"errors": [{"code": 1257, "title": "INVALID PROPERTY CODE", "status": 400}]}
        self.api.route("GET", HOTEL_OFFERS_PATH, errors, status=400)

        result = await hotel_search({"hotelIds": "BAD"})

        self.assertIn("error", result.to_dict())
        self.assertEqual(result.error.payload, errors)

    async def test_bad_date_is_a_validation_failure(self):
        result = await hotel_search({"hotelIds": "MCLONGHM", "checkInDate": "01/11/2025"})

        self.assertEqual(result.error.kind, "validation")
        self.assertEqual(self.api.requests, [])


if __name__ == "__main__":
    unittest.main()
