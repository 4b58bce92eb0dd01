import base64

import pytest


@pytest.fixture
def clip_payload():
    raw = bytes(range(256)) * 64
    return base64.b64encode(raw).decode("ascii")


def _upload(client, **overrides):
    body = {
        "level_id": 1,
        "title": "Diwali",
        "description": "Festival of lights",
        "videoData": "AAEC",
        "filename": "diwali.mp4",
        "fileSize": 3,
        "mimeType": "video/mp4",
    }
    body.update(overrides)
    return client.post("/api/videos", json=body)


def test_upload_returns_generated_id(client):
    response = _upload(client)
    assert response.status_code == 200
    assert response.json() == {"id": 1, "message": "Video uploaded successfully"}


def test_upload_without_video_data_is_rejected(client):
    response = client.post("/api/videos", json={"level_id": 1, "title": "Empty"})
    assert response.status_code == 400
    assert response.json() == {"error": "No video data provided"}
    assert client.get("/api/videos").json() == []


def test_upload_with_empty_video_data_is_rejected(client):
    response = _upload(client, videoData="")
    assert response.status_code == 400
    assert client.get("/api/videos").json() == []


def test_upload_without_body_is_rejected(client):
    response = client.post("/api/videos")
    assert response.status_code == 400
    assert response.json()["error"] == "No video data provided"


def test_upload_without_title_is_storage_error(client):
    response = _upload(client, title=None)
    assert response.status_code == 500
    assert "NOT NULL constraint failed: videos.title" in response.json()["error"]


def test_payload_round_trips_exactly(client, clip_payload):
    new_id = _upload(client, videoData=clip_payload, fileSize=len(clip_payload)).json()["id"]

    response = client.get(f"/api/videos/{new_id}")
    assert response.status_code == 200
    video = response.json()
    assert video["video_data"] == clip_payload
    assert base64.b64decode(video["video_data"]) == bytes(range(256)) * 64
    assert video["filename"] == "diwali.mp4"
    assert video["file_size"] == len(clip_payload)
    assert video["mime_type"] == "video/mp4"
    assert video["level_id"] == 1


def test_get_missing_video_returns_404(client):
    response = client.get("/api/videos/999")
    assert response.status_code == 404
    assert response.json() == {"error": "Video not found"}


def test_list_videos_joins_level_and_orders_by_level_then_title(client):
    _upload(client, level_id=2, title="Kathputli")
    _upload(client, level_id=1, title="Holi")
    _upload(client, level_id=1, title="Diwali")
    _upload(client, level_id=42, title="Orphan")

    videos = client.get("/api/videos").json()
    assert [video["title"] for video in videos] == ["Orphan", "Diwali", "Holi", "Kathputli"]

    orphan = videos[0]
    assert orphan["level_number"] is None
    assert orphan["level_title"] is None

    diwali = videos[1]
    assert diwali["level_number"] == 1
    assert diwali["level_title"] == "Festivals & Celebrations"
    assert diwali["video_data"] == "AAEC"


def test_list_videos_for_level(client):
    _upload(client, level_id=1, title="Diwali")
    _upload(client, level_id=2, title="Kathputli")

    videos = client.get("/api/videos/level/1").json()
    assert [video["title"] for video in videos] == ["Diwali"]
    assert "level_number" not in videos[0]
    assert videos[0]["video_data"] == "AAEC"


def test_list_videos_for_empty_level(client):
    assert client.get("/api/videos/level/3").json() == []


def test_upload_does_not_check_level_exists(client):
    new_id = _upload(client, level_id=999).json()["id"]
    assert client.get(f"/api/videos/{new_id}").json()["level_id"] == 999


def test_upload_stores_numeric_text_fields_as_text(client):
    response = _upload(client, title=123, description=4.5, filename=7, mimeType=0)
    assert response.status_code == 200

    video = client.get(f"/api/videos/{response.json()['id']}").json()
    assert video["title"] == "123"
    assert video["description"] == "4.5"
    assert video["filename"] == "7"
    assert video["mime_type"] == "0"


def test_upload_accepts_numeric_strings_for_integer_fields(client):
    response = _upload(client, level_id="2", fileSize="2048")
    assert response.status_code == 200

    video = client.get(f"/api/videos/{response.json()['id']}").json()
    assert video["level_id"] == 2
    assert video["file_size"] == 2048


def test_upload_with_unusable_level_id_uses_error_shape(client):
    response = _upload(client, level_id="first")
    assert response.status_code == 422
    assert "level_id" in response.json()["error"]
    assert client.get("/api/videos").json() == []


def test_delete_video(client):
    new_id = _upload(client).json()["id"]

    response = client.delete(f"/api/videos/{new_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Video deleted successfully"}
    assert client.get(f"/api/videos/{new_id}").status_code == 404


def test_delete_missing_video_reports_success(client):
    response = client.delete("/api/videos/999")
    assert response.status_code == 200
    assert response.json() == {"message": "Video deleted successfully"}
