# tests/test_api/test_routes_complaint.py - Complaint submission with attachments

import os

SESSION = {"Authorization": "complaint-session"}


def test_submit_complaint_without_attachment(client, storage, complaint_form, upload_dir):
    response = client.post("/api/complaints", data=complaint_form, headers=SESSION)

    assert response.status_code == 201
    assert response.json()["message"] == "Complaint submitted successfully"

    complaint = storage.get_complaint_by_id(response.json()["id"])
    assert complaint.session_id == "complaint-session"
    assert complaint.status.value == "open"
    assert complaint.attachment is None
    assert complaint.order_number == "ORD-42"


def test_submit_complaint_with_attachment(client, storage, complaint_form, upload_dir):
    files = {"attachment": ("invoice.pdf", b"%PDF-1.4 test", "application/pdf")}
    response = client.post("/api/complaints", data=complaint_form, files=files, headers=SESSION)

    assert response.status_code == 201
    complaint = storage.get_complaint_by_id(response.json()["id"])
    assert complaint.attachment_name == "invoice.pdf"
    assert complaint.attachment.startswith("/uploads/")
    assert complaint.attachment.endswith(".pdf")

    stored = os.listdir(upload_dir)
    assert len(stored) == 1
    assert (upload_dir / stored[0]).read_bytes() == b"%PDF-1.4 test"


def test_invalid_complaint_removes_staged_file(client, storage, complaint_form, upload_dir):
    complaint_form["description"] = "too short"
    files = {"attachment": ("photo.png", b"\x89PNG", "image/png")}

    response = client.post("/api/complaints", data=complaint_form, files=files, headers=SESSION)

    assert response.status_code == 400
    assert response.json()["detail"]["errors"]
    assert storage.get_all_complaints() == []
    assert os.listdir(upload_dir) == []


def test_unsupported_attachment_type_is_400(client, storage, complaint_form, upload_dir):
    files = {"attachment": ("script.sh", b"echo hi", "text/x-shellscript")}
    response = client.post("/api/complaints", data=complaint_form, files=files, headers=SESSION)

    assert response.status_code == 400
    assert storage.get_all_complaints() == []


def test_list_my_complaints(client, complaint_form, upload_dir):
    client.post("/api/complaints", data=complaint_form, headers=SESSION)
    client.post("/api/complaints", data=complaint_form, headers={"Authorization": "other"})

    response = client.get("/api/complaints", headers=SESSION)
    assert response.status_code == 200
    assert len(response.json()) == 1
    assert response.json()[0]["subject"] == "Damaged headphones"


def test_list_complaints_without_session_is_400(client):
    assert client.get("/api/complaints").status_code == 400
