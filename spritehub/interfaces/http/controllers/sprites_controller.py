# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from spritehub.application.services.sprite_service import SpriteService
from spritehub.application.use_cases.users.authenticate_token import (
    AuthenticateTokenUseCase,
)
from spritehub.interfaces.http.auth import bearer_required
from spritehub.interfaces.http.dto.sprites import CreateSpriteDTO, UpdateSpriteDTO
from spritehub.shared.errors.validation import validation_error_from
from spritehub.shared.validation import Err, validate_payload


class SpritesController:
    def __init__(
        self,
        *,
        sprite_service: SpriteService,
        authenticate: AuthenticateTokenUseCase,
    ) -> None:
        self._sprites = sprite_service
        self._authenticate = authenticate

    def list_sprites(self) -> tuple[Response, int]:
        return jsonify([sprite.to_dict() for sprite in self._sprites.list()]), 200

    def random_sprite(self) -> tuple[Response, int]:
        sprite = self._sprites.fetch_random()
        return jsonify(sprite.to_dict()), 200

    def get_sprite(self, sprite_id: int) -> tuple[Response, int]:
        return jsonify(self._sprites.get(sprite_id).to_dict()), 200

    def create_sprite(self) -> tuple[Response, int]:
        result = validate_payload(CreateSpriteDTO, request.get_json(silent=True))
        if isinstance(result, Err):
            raise validation_error_from(result.reason)
        dto = result.value

        sprite = self._sprites.create(dto.url, dto.name)
        return jsonify({"message": "Sprite created", "data": sprite.to_dict()}), 201

    def update_sprite(self, sprite_id: int) -> tuple[Response, int]:
        result = validate_payload(UpdateSpriteDTO, request.get_json(silent=True))
        if isinstance(result, Err):
            raise validation_error_from(result.reason)
        dto = result.value

        sprite = self._sprites.update(sprite_id, url=dto.url, name=dto.name)
        return jsonify({"message": "Sprite updated", "data": sprite.to_dict()}), 200

    def delete_sprite(self, sprite_id: int) -> tuple[Response, int]:
        return jsonify(self._sprites.remove(sprite_id)), 200

    def delete_all(self) -> tuple[Response, int]:
        return jsonify(self._sprites.remove_all()), 200

    def as_blueprint(self) -> Blueprint:
        guard = bearer_required(self._authenticate)
        bp = Blueprint("pokemon", __name__, url_prefix="/pokemon")
        bp.add_url_rule("", view_func=guard(self.list_sprites), methods=["GET"])
        bp.add_url_rule("", view_func=guard(self.create_sprite), methods=["POST"])
        bp.add_url_rule("/random", view_func=guard(self.random_sprite), methods=["GET"])
        # static segment first so /all never reaches the int converter
        bp.add_url_rule("/all", view_func=guard(self.delete_all), methods=["DELETE"])
        bp.add_url_rule(
            "/<int:sprite_id>", view_func=guard(self.get_sprite), methods=["GET"]
        )
        bp.add_url_rule(
            "/<int:sprite_id>", view_func=guard(self.update_sprite), methods=["PUT"]
        )
        bp.add_url_rule(
            "/<int:sprite_id>", view_func=guard(self.delete_sprite), methods=["DELETE"]
        )
        return bp


__all__ = ["SpritesController"]
