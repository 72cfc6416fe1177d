from conftest import make_result, stored_token

from app import format_rupiah, parse_service_form, sort_services


SERVICES = [
    {"id": 2, "name": "Niaga Kecil", "min_usage": 21, "max_usage": 50, "price": 75000},
    {"id": 1, "name": "Sambungan Rumah", "min_usage": 0, "max_usage": 20, "price": 50000},
]

NEW_SERVICE = {"name": "Sambungan Rumah", "min_usage": "0", "max_usage": "20", "price": "50000"}


# ---------------- List ----------------

def test_list_requires_login(client, api):
    response = client.get("/admin/services")

    assert response.status_code == 401
    api.list_services.assert_not_called()


def test_list_renders_services_sorted_by_usage(logged_in_client, api):
    api.list_services.return_value = make_result(data=SERVICES, count=2)

    response = logged_in_client.get("/admin/services")
    body = response.data.decode()

    assert response.status_code == 200
    assert "Kelola 2 layanan PDAM" in body
    assert body.index("Sambungan Rumah") < body.index("Niaga Kecil")
    assert "Rp 75.000" in body
    assert "/admin/services/edit/2" in body
    api.list_services.assert_called_once_with("tok-123")


def test_empty_list_is_distinct_from_error(logged_in_client, api):
    api.list_services.return_value = make_result(message="OK", data=[], count=0)
    empty = logged_in_client.get("/admin/services").data

    api.list_services.return_value = make_result(
        success=False, message="Gagal mengambil layanan", http_status=500
    )
    error = logged_in_client.get("/admin/services").data

    assert b"Tidak ada data layanan" in empty
    assert b"Error:" not in empty
    assert b"Error: Gagal mengambil layanan" in error
    assert b"Tidak ada data layanan" not in error


def test_success_false_on_2xx_is_error_view(logged_in_client, api):
    api.list_services.return_value = make_result(success=False, message="Akses ditolak")

    response = logged_in_client.get("/admin/services")

    assert b"Error: Akses ditolak" in response.data


def test_table_variant_uses_same_data(logged_in_client, api):
    api.list_services.return_value = make_result(data=SERVICES, count=2)

    response = logged_in_client.get("/admin/services?variant=table")

    assert b"<table" in response.data
    assert b"Sambungan Rumah" in response.data


def test_unknown_variant_falls_back_to_grid(logged_in_client, api):
    api.list_services.return_value = make_result(data=SERVICES)

    response = logged_in_client.get("/admin/services?variant=carousel")

    assert b"<table" not in response.data
    assert b"Kelola 2 layanan PDAM" in response.data


# ---------------- Create ----------------

def test_create_success_redirects_to_list(logged_in_client, api):
    api.create_service.return_value = make_result(
        message="Service berhasil dibuat", data={"id": 9, "name": "Sambungan Rumah"}, http_status=201
    )

    response = logged_in_client.post("/admin/services/add", data=NEW_SERVICE)

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/admin/services")
    api.create_service.assert_called_once_with(
        "tok-123", {"name": "Sambungan Rumah", "min_usage": 0, "max_usage": 20, "price": 50000}
    )

    api.list_services.return_value = make_result(data=[])
    listing = logged_in_client.get("/admin/services")
    assert b"Service berhasil dibuat" in listing.data


def test_create_success_clears_form(logged_in_client, api):
    api.create_service.return_value = make_result(http_status=201)

    logged_in_client.post("/admin/services/add", data=NEW_SERVICE)
    form = logged_in_client.get("/admin/services/add")

    assert b'value="Sambungan Rumah"' not in form.data


def test_create_failure_shows_message_and_keeps_values(logged_in_client, api):
    api.create_service.return_value = make_result(
        success=False, message="Nama layanan sudah ada", http_status=409
    )

    response = logged_in_client.post("/admin/services/add", data=NEW_SERVICE)

    assert response.status_code == 200
    assert b"Nama layanan sudah ada" in response.data
    assert b'value="Sambungan Rumah"' in response.data


def test_create_validation_skips_backend(logged_in_client, api):
    response = logged_in_client.post(
        "/admin/services/add", data={**NEW_SERVICE, "price": "lima puluh ribu"}
    )

    assert response.status_code == 400
    assert b"Harga harus berupa angka." in response.data
    api.create_service.assert_not_called()


def test_create_allows_min_above_max(logged_in_client, api):
    api.create_service.return_value = make_result(http_status=201)

    logged_in_client.post("/admin/services/add", data={**NEW_SERVICE, "min_usage": "30"})

    payload = api.create_service.call_args.args[1]
    assert payload["min_usage"] == 30
    assert payload["max_usage"] == 20


def test_create_with_expired_backend_session(logged_in_client, api):
    api.create_service.return_value = make_result(success=False, message="Unauthorized", http_status=401)

    response = logged_in_client.post("/admin/services/add", data=NEW_SERVICE)

    assert response.status_code == 401
    assert stored_token(logged_in_client) is None


# ---------------- Edit ----------------

def test_edit_prefills_form(logged_in_client, api):
    api.get_service.return_value = make_result(data=SERVICES[1])

    response = logged_in_client.get("/admin/services/edit/1")

    assert response.status_code == 200
    assert b'value="Sambungan Rumah"' in response.data
    assert b'value="50000"' in response.data
    api.get_service.assert_called_once_with("tok-123", 1)


def test_edit_fetch_failure_returns_to_list(logged_in_client, api):
    api.get_service.return_value = make_result(success=False, message="Not found", http_status=404)

    response = logged_in_client.get("/admin/services/edit/99")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/admin/services")


def test_edit_submit_patches_all_fields(logged_in_client, api):
    api.update_service.return_value = make_result(message="Service berhasil diperbarui")

    response = logged_in_client.post(
        "/admin/services/edit/1",
        data={"name": "Sambungan Rumah", "min_usage": "0", "max_usage": "25", "price": "55000"},
    )

    assert response.headers["Location"].endswith("/admin/services")
    api.update_service.assert_called_once_with(
        "tok-123", 1, {"name": "Sambungan Rumah", "min_usage": 0, "max_usage": 25, "price": 55000}
    )


def test_edit_submit_failure_stays_on_page(logged_in_client, api):
    api.update_service.return_value = make_result(
        success=False, message="max_usage tidak valid", http_status=422
    )

    response = logged_in_client.post(
        "/admin/services/edit/1",
        data={"name": "Sambungan Rumah", "min_usage": "0", "max_usage": "25", "price": "55000"},
    )

    assert response.status_code == 200
    assert b"max_usage tidak valid" in response.data
    assert b'value="55000"' in response.data


# ---------------- Helpers ----------------

def test_parse_service_form_requires_name():
    values, payload, error = parse_service_form({"name": "  ", "min_usage": "0", "max_usage": "1", "price": "2"})

    assert payload is None
    assert error == "Nama layanan wajib diisi."


def test_sort_services_handles_empty_list():
    assert sort_services([]) == []


def test_format_rupiah():
    assert format_rupiah(50000) == "Rp 50.000"
    assert format_rupiah("1250000") == "Rp 1.250.000"
    assert format_rupiah(None) == "Rp 0"


def test_edit_prefill_success_false_on_2xx_returns_to_list(logged_in_client, api):
    api.get_service.return_value = make_result(
        success=False, message="Service tidak ditemukan", data={"success": False, "message": "Service tidak ditemukan"}
    )

    response = logged_in_client.get("/admin/services/edit/5")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/admin/services")


def test_list_with_null_and_string_usage_renders_values_unchanged(logged_in_client, api):
    api.list_services.return_value = make_result(data=[
        {"id": 1, "name": "Niaga", "min_usage": 10, "max_usage": 40, "price": 7000},
        {"id": 2, "name": "Sosial", "min_usage": None, "max_usage": None, "price": 1000},
        {"id": 3, "name": "Rumah", "min_usage": "0", "max_usage": 9, "price": 3000},
    ])

    response = logged_in_client.get("/admin/services?variant=table")
    body = response.data.decode()

    assert response.status_code == 200
    assert "<td class=\"px-4 py-3 whitespace-nowrap text-sm text-gray-900\">10</td>" in body
    assert ">10.0<" not in body
    assert ">nan<" not in body
    assert body.index("Rumah") < body.index("Niaga") < body.index("Sosial")


def test_sort_services_keeps_rows_and_puts_unknown_usage_last():
    rows = [
        {"id": 1, "min_usage": 20},
        {"id": 2},
        {"id": 3, "min_usage": "abc"},
        {"id": 4, "min_usage": 0},
        "bukan-dict",
    ]

    result = sort_services(rows)

    assert [row["id"] for row in result] == [4, 1, 2, 3]
    assert result[0] is rows[3]
    assert result[1]["min_usage"] == 20
