#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Запись профилей пользователей в Google Sheets
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

import gspread
from google.oauth2.service_account import Credentials
from gspread.utils import ValueInputOption

from models.session import Profile, iso_timestamp

logger = logging.getLogger(__name__)

SCOPES = ['https://www.googleapis.com/auth/spreadsheets']

HEADER = ['user_id', 'chat_id', 'niche', 'keywords', 'country', 'created_at', 'updated_at']
COLUMNS = 'A:G'


class SheetsProfileRepository:
    """Upsert профиля по user_id: одна строка на пользователя"""

    def __init__(
        self,
        sheet_id: str = '',
        credentials_json: str = '',
        worksheet_title: str = 'users',
        worksheet: Optional[gspread.Worksheet] = None,
    ):
        """
        Args:
            sheet_id: ID таблицы (из URL)
            credentials_json: JSON сервисного аккаунта
            worksheet_title: Лист с профилями
            worksheet: Готовый лист (если уже открыт)
        """
        self.sheet_id = sheet_id
        self.credentials_json = credentials_json
        self.worksheet_title = worksheet_title
        self._worksheet = worksheet

    def _get_worksheet(self) -> gspread.Worksheet:
        """Открыть лист при первом обращении"""
        if self._worksheet is None:
            creds_dict: Dict[str, Any] = json.loads(self.credentials_json)
            creds = Credentials.from_service_account_info(creds_dict, scopes=SCOPES)
            gc = gspread.authorize(creds)
            self._worksheet = gc.open_by_key(self.sheet_id).worksheet(self.worksheet_title)
            logger.info(f"📗 Google Sheets подключен, лист '{self.worksheet_title}'")
        return self._worksheet

    async def save(self, profile: Profile) -> bool:
        """
        Сохранить профиль.

        Returns:
            True при успехе, False при любой ошибке таблицы/сети/ключа
        """
        try:
            await asyncio.to_thread(self._upsert, profile)
        except Exception as e:
            logger.error(f"❌ Ошибка сохранения в Sheets (user {profile.user_id}): {e}", exc_info=True)
            return False

        logger.info(f"💾 Пользователь {profile.user_id} сохранен в Sheets")
        return True

    def _upsert(self, profile: Profile) -> None:
        worksheet = self._get_worksheet()
        rows = worksheet.get_values(COLUMNS)

        if not rows:
            # Пустой лист: первая строка всегда заголовок
            worksheet.update(
                values=[HEADER],
                range_name='A1:G1',
                value_input_option=ValueInputOption.raw,
            )

        row_data = profile.to_row(iso_timestamp())
        row_number = self.find_row(rows, profile.user_id)

        if row_number:
            worksheet.update(
                values=[row_data],
                range_name=f'A{row_number}:G{row_number}',
                value_input_option=ValueInputOption.raw,
            )
        else:
            worksheet.append_row(
                row_data,
                value_input_option=ValueInputOption.raw,
                table_range=COLUMNS,
            )

    @staticmethod
    def find_row(rows: List[List[Any]], user_id: int) -> Optional[int]:
        """Номер строки (с 1) пользователя, заголовок пропускается"""
        key = str(user_id)
        for idx, row in enumerate(rows[1:], start=2):
            if row and str(row[0]) == key:
                return idx
        return None
