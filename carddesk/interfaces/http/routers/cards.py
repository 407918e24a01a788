"""Card issuance and lookup endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.core.security import TokenClaims
from carddesk.interfaces.http.deps import get_current_claims, get_db_session
from carddesk.modules.cards import Card, CardCreateInput, CardService
from carddesk.modules.transactions import TransactionRecord, TransactionService
from carddesk.schemas import CardCreate, CardResponse, TransactionResponse

router = APIRouter()


def to_card_response(card: Card) -> CardResponse:
    return CardResponse(
        card_number=card.card_number,
        holder_name=card.holder_name,
        balance=card.balance,
        created_at=card.created_at,
    )


def to_transaction_response(record: TransactionRecord) -> TransactionResponse:
    return TransactionResponse(
        transaction_id=record.transaction_id,
        card_number=record.card_number,
        amount=record.amount,
        branch_id=record.branch_id,
        type=record.type.value,
        timestamp=record.timestamp,
    )


@router.get("", response_model=list[CardResponse], summary="List all cards")
async def list_cards(
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db_session),
) -> list[CardResponse]:
    cards = await CardService.with_session(db).list_all()
    return [to_card_response(card) for card in cards]


@router.post("", response_model=CardResponse, status_code=status.HTTP_201_CREATED, summary="Issue a card")
async def create_card(
    payload: CardCreate,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db_session),
) -> CardResponse:
    card = await CardService.with_session(db).create(
        CardCreateInput(
            card_number=payload.card_number,
            holder_name=payload.holder_name,
            initial_balance=payload.initial_balance or 0,
        )
    )
    await db.commit()
    return to_card_response(card)


@router.get("/{card_number}", response_model=CardResponse, summary="Get a card")
async def get_card(
    card_number: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db_session),
) -> CardResponse:
    card = await CardService.with_session(db).find_by_number(card_number)
    return to_card_response(card)


@router.get(
    "/{card_number}/transactions",
    response_model=list[TransactionResponse],
    summary="List the transactions recorded against a card",
)
async def list_card_transactions(
    card_number: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db_session),
) -> list[TransactionResponse]:
    records = await TransactionService.with_session(db).list_for_card(card_number)
    return [to_transaction_response(record) for record in records]
